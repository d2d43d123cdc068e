"""
Simplified dependency injection container for the pager settings service.
"""

import logging
from typing import Optional

from pager_for_content_type.application.forms.settings_form import SettingsForm
from pager_for_content_type.application.use_cases.pager_settings_use_case import (
    PagerSettingsUseCase,
)
from pager_for_content_type.domain.repositories.content_type_registry import ContentTypeRegistry
from pager_for_content_type.infrastructure.configuration.config import Settings, get_config
from pager_for_content_type.infrastructure.database.operations import DatabaseManager
from pager_for_content_type.infrastructure.repositories.sqlalchemy_config_store import (
    SQLAlchemyConfigStore,
)
from pager_for_content_type.infrastructure.repositories.sqlalchemy_content_type_registry import (
    SQLAlchemyContentTypeRegistry,
)

logger = logging.getLogger(__name__)


class Container:
    """Simple dependency injection container"""

    def __init__(
        self,
        config: Optional[Settings] = None,
        db_manager: Optional[DatabaseManager] = None,
        content_type_registry: Optional[ContentTypeRegistry] = None,
    ):
        self.config = config or get_config()
        self.db_manager = db_manager or DatabaseManager(self.config)
        self._content_type_registry = content_type_registry

    def get_content_type_registry(self) -> ContentTypeRegistry:
        """Get the content type registry, backed by the database unless injected"""
        if self._content_type_registry is None:
            self._content_type_registry = SQLAlchemyContentTypeRegistry(
                self.db_manager.get_session
            )
        return self._content_type_registry

    def get_config_store(self) -> SQLAlchemyConfigStore:
        """New request-scoped configuration store"""
        return SQLAlchemyConfigStore(self.config.config_namespace, self.db_manager.get_session)

    def get_pager_settings_use_case(self) -> PagerSettingsUseCase:
        """Pager settings use case over a fresh configuration store"""
        return PagerSettingsUseCase(self.get_config_store(), self.get_content_type_registry())

    def get_settings_form(self) -> SettingsForm:
        """Settings form for one render or submission"""
        return SettingsForm(self.get_pager_settings_use_case())


_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance"""
    global _container
    if _container is None:
        _container = Container()
        logger.info("Container initialized")
    return _container


def set_container(container: Optional[Container]) -> None:
    """Replace the global container (None resets it)"""
    global _container
    _container = container
