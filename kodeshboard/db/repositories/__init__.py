"""
Per-store repository modules for database access.

Each module implements the generic create/read/update/delete calls for one
entity store; routers and services use them instead of querying directly.
"""
