"""
Repository implementations

SQLAlchemy backed configuration store and content type registry, plus
the flat-key mapping used at the storage boundary.
"""

from .settings_mapper import settings_from_store, settings_to_flat_keys
from .sqlalchemy_config_store import SQLAlchemyConfigStore
from .sqlalchemy_content_type_registry import SQLAlchemyContentTypeRegistry
from .static_content_type_registry import StaticContentTypeRegistry

__all__ = [
    "SQLAlchemyConfigStore",
    "SQLAlchemyContentTypeRegistry",
    "StaticContentTypeRegistry",
    "settings_from_store",
    "settings_to_flat_keys",
]
