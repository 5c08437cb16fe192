"""HTTP API for the host diff service."""
