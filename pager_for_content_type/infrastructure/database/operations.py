"""
Database engine and session management
"""

import logging
from typing import Any, Optional

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pager_for_content_type.infrastructure.configuration.config import get_config
from pager_for_content_type.infrastructure.database.models import Base
from pager_for_content_type.infrastructure.logging.logging_config import PerformanceLogger
from pager_for_content_type.infrastructure.utilities.constants import DatabaseSettings
from pager_for_content_type.infrastructure.utilities.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Database manager owning the engine and the session factory"""

    def __init__(self, config: Optional[Any] = None):
        """Initialize database manager with configuration"""
        self.config = config or get_config()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(__name__)

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create database engine with environment-specific settings"""
        database_url = self.config.database_url

        engine_kwargs: dict[str, Any] = {
            "pool_pre_ping": True,
            "echo": self.config.environment == "development",
        }

        # SQLite-specific configurations
        if database_url.startswith("sqlite"):
            engine_kwargs.update({
                "poolclass": StaticPool,
                "connect_args": {
                    "check_same_thread": False,
                    "timeout": DatabaseSettings.CONNECTION_TIMEOUT_SECONDS
                },
            })
        else:
            engine_kwargs["pool_recycle"] = DatabaseSettings.POOL_RECYCLE_SECONDS

        return create_engine(database_url, **engine_kwargs)

    def get_session_factory(self) -> sessionmaker:
        """Get session factory"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.get_engine(),
                expire_on_commit=False
            )
        return self._session_factory

    def get_session(self) -> Session:
        """Get database session"""
        return self.get_session_factory()()

    def create_tables(self) -> None:
        """Create all database tables"""
        try:
            with PerformanceLogger("create_tables", self.logger):
                Base.metadata.create_all(self.get_engine())
                self.logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            self.logger.error("Failed to create database tables: %s", e, exc_info=True)
            raise StoreUnavailableError(
                f"Failed to create database tables: {e}", "create_tables"
            ) from e

    def drop_tables(self) -> None:
        """Drop all database tables"""
        try:
            with PerformanceLogger("drop_tables", self.logger):
                Base.metadata.drop_all(self.get_engine())
                self.logger.info("Database tables dropped successfully")
        except SQLAlchemyError as e:
            self.logger.error("Failed to drop database tables: %s", e, exc_info=True)
            raise StoreUnavailableError(
                f"Failed to drop database tables: {e}", "drop_tables"
            ) from e

    def health_check(self) -> dict[str, Any]:
        """Perform database health check"""
        try:
            with self.get_session() as session:
                result = session.execute(text("SELECT 1")).scalar()
            if result == 1:
                return {"status": "healthy", "environment": self.config.environment}
            return {
                "status": "unhealthy",
                "error": "Health check query returned unexpected result",
            }
        except SQLAlchemyError as e:
            self.logger.error("Database health check failed: %s", e, exc_info=True)
            return {"status": "unhealthy", "error": str(e)}

    def close(self) -> None:
        """Close database connections"""
        if self._engine:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.logger.info("Database connections closed")


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    """Get global database manager instance"""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def get_db_session() -> Session:
    """Get database session - convenience function"""
    return get_db_manager().get_session()


def init_db() -> DatabaseManager:
    """Initialize database tables"""
    manager = get_db_manager()
    manager.create_tables()
    return manager
