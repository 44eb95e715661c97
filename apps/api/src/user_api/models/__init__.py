"""API models package."""
