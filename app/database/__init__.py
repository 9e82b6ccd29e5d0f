"""Database engine and session management for CVSift."""

from .sqlmodel_engine import SQLModelDatabaseManager

__all__ = ["SQLModelDatabaseManager"]
