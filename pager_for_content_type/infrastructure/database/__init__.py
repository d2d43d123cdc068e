"""
Database Infrastructure

Contains SQLAlchemy models and the database manager.
"""

from .models import Base, ConfigEntry, ContentTypeRecord
from .operations import DatabaseManager, get_db_manager, get_db_session, init_db

__all__ = [
    "Base",
    "ConfigEntry",
    "ContentTypeRecord",
    "DatabaseManager",
    "init_db",
    "get_db_manager",
    "get_db_session",
]
