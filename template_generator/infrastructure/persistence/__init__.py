"""Persistence: async engine and session, ORM models, repositories, Alembic migrations."""
