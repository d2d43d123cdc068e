"""
Domain repository interfaces

Contains abstract interfaces for the two host capabilities the pager
settings depend on: the content type registry and the configuration store.
"""

from .config_store import ConfigStore
from .content_type_registry import ContentTypeRegistry

__all__ = [
    "ConfigStore",
    "ContentTypeRegistry",
]
