"""Application layer: DTOs, repository ports, listing core, and use cases."""
