"""Request-level guards."""
