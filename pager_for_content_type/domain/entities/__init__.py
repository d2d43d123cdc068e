"""
Domain entities package

Contains the content type reference and the pager settings records.
"""

from .content_type import ContentType
from .pager_settings import ContentTypePagerSettings, GlobalPagerSettings, PagerSettings

__all__ = [
    "ContentType",
    "ContentTypePagerSettings",
    "GlobalPagerSettings",
    "PagerSettings",
]
