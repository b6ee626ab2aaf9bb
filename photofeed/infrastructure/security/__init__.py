"""Security adapters: JWT access tokens and password hashing."""
