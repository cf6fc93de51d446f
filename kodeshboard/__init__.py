"""Synagogue information board service."""
