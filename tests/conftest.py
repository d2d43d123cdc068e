"""
Test configuration and fixtures for the pager settings service
"""

import os
from unittest.mock import patch

import pytest

from pager_for_content_type.application.dtos.settings_dtos import (
    ContentTypeSubmission,
    Submission,
)
from pager_for_content_type.application.use_cases.pager_settings_use_case import (
    PagerSettingsUseCase,
)
from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.value_objects.content_type_id import ContentTypeId
from pager_for_content_type.infrastructure.configuration.config import Settings, reset_config
from pager_for_content_type.infrastructure.database.operations import DatabaseManager
from pager_for_content_type.infrastructure.repositories.sqlalchemy_config_store import (
    SQLAlchemyConfigStore,
)
from pager_for_content_type.infrastructure.repositories.static_content_type_registry import (
    StaticContentTypeRegistry,
)
from pager_for_content_type.infrastructure.utilities.constants import FormSettings


@pytest.fixture(autouse=True)
def mock_env():
    """Mock environment variables for testing"""
    test_env = {
        'DATABASE_URL': 'sqlite:///:memory:',
        'ENVIRONMENT': 'test',
        'LOG_LEVEL': 'DEBUG',
    }

    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory database"""
    return Settings(database_url="sqlite:///:memory:", environment="test")


@pytest.fixture
def db_manager(test_settings):
    """Database manager with all tables created"""
    manager = DatabaseManager(test_settings)
    manager.create_tables()
    try:
        yield manager
    finally:
        manager.close()


@pytest.fixture
def content_types():
    """Content types as a host registry would list them"""
    return [
        ContentType.create("article", "Article"),
        ContentType.create("page", "Basic page"),
    ]


@pytest.fixture
def registry(content_types):
    return StaticContentTypeRegistry(content_types)


@pytest.fixture
def config_store(db_manager):
    return SQLAlchemyConfigStore(FormSettings.CONFIG_NAME, db_manager.get_session)


@pytest.fixture
def use_case(config_store, registry):
    return PagerSettingsUseCase(config_store, registry)


@pytest.fixture
def valid_submission():
    """Submission with global texts and both content types"""
    return Submission(
        previous_text="« Prev",
        next_text="Next »",
        content_types={
            ContentTypeId("article"): ContentTypeSubmission(
                enabled=True,
                pager_by_author=False,
                previous_text="",
                next_text="",
                more_links_count=4,
            ),
            ContentTypeId("page"): ContentTypeSubmission(
                enabled=False,
                pager_by_author=True,
                previous_text="Older page",
                next_text="Newer page",
                more_links_count=10,
            ),
        },
    )
