"""Database Infrastructure — SQLAlchemy Base shared by all ORM models."""
