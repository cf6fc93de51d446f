"""Domain services composed from the repositories."""
