"""API request/response schemas (pydantic, camelCase JSON)."""
