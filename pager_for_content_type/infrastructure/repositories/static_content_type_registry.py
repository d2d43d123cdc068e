"""
In-process content type registry
"""

from typing import Iterable, List

from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.repositories.content_type_registry import ContentTypeRegistry


class StaticContentTypeRegistry(ContentTypeRegistry):
    """Registry over a fixed list of content types, for hosts that pass them in"""

    def __init__(self, content_types: Iterable[ContentType] = ()):
        self._content_types = list(content_types)

    @classmethod
    def from_pairs(cls, *pairs: tuple[str, str]) -> "StaticContentTypeRegistry":
        return cls(ContentType.create(type_, name) for type_, name in pairs)

    def list_content_types(self) -> List[ContentType]:
        return list(self._content_types)
