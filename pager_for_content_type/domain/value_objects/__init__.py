"""
Domain value objects package

Contains immutable value objects that represent concepts in the pager domain.
"""

from .content_type_id import ContentTypeId
from .more_links_count import MoreLinksCount
from .pager_text import PagerText

__all__ = [
    "ContentTypeId",
    "MoreLinksCount",
    "PagerText",
]
