"""Route handlers that belong to no feature module."""
