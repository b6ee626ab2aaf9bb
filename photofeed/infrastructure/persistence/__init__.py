"""Persistence: async engine, ORM models, repositories, and listing SQL."""
