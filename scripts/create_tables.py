#!/usr/bin/env python3
"""
Simple script to create database tables for the pager settings service.

Content types given as TYPE=Label arguments are registered as well:

    python scripts/create_tables.py article=Article page="Basic page"
"""

import logging
import sys

from pager_for_content_type.infrastructure.configuration.config import get_config
from pager_for_content_type.infrastructure.database.operations import init_db
from pager_for_content_type.infrastructure.logging.logging_config import (
    LoggingConfigOptions,
    setup_logging,
)
from pager_for_content_type.infrastructure.repositories.sqlalchemy_content_type_registry import (
    SQLAlchemyContentTypeRegistry,
)

logger = logging.getLogger(__name__)


def create_tables(content_types: list[str]) -> None:
    """Create all database tables and register the given content types"""
    config = get_config()
    manager = init_db()
    logger.info("Database tables created at %s", config.database_url)

    registry = SQLAlchemyContentTypeRegistry(manager.get_session)
    for argument in content_types:
        type_, _, name = argument.partition("=")
        registry.register(type_, name or type_)


if __name__ == "__main__":
    setup_logging(LoggingConfigOptions(enable_file=False, enable_json=False))
    create_tables(sys.argv[1:])
