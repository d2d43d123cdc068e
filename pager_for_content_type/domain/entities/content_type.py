"""
Content Type Entity - read-only reference to a host content type
"""

from dataclasses import dataclass

from pager_for_content_type.domain.value_objects.content_type_id import ContentTypeId


@dataclass(frozen=True)
class ContentType:
    """Content type as supplied by the host registry"""

    id: ContentTypeId
    name: str

    def __post_init__(self):
        """Fall back to the machine name when no label is given"""
        if not self.name:
            object.__setattr__(self, "name", self.id.value)

    @property
    def type(self) -> str:
        """Machine name used in configuration keys"""
        return self.id.value

    @classmethod
    def create(cls, type_: str, name: str = "") -> "ContentType":
        """Create a content type from its machine name and label"""
        return cls(id=ContentTypeId(type_), name=name)
