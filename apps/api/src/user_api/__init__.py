"""User management HTTP API."""
