"""
Pager Settings Entities

The global record, the per content type records and the snapshot that
groups them. Records are plain values; validation happens when a
submission is applied so every offending field can be reported at once.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.value_objects.content_type_id import ContentTypeId
from pager_for_content_type.infrastructure.utilities.constants import PagerLimits


@dataclass(frozen=True)
class GlobalPagerSettings:
    """Default link texts used when a content type has no override"""

    previous_text: str = ""
    next_text: str = ""


@dataclass(frozen=True)
class ContentTypePagerSettings:
    """Pager settings of a single content type"""

    enabled: bool = False
    pager_by_author: bool = False
    previous_text: str = ""
    next_text: str = ""
    more_links_count: int = PagerLimits.DEFAULT_MORE_LINKS

    def resolve_previous_text(self, global_settings: GlobalPagerSettings) -> str:
        """Override text, or the global text when the override is empty"""
        return self.previous_text or global_settings.previous_text

    def resolve_next_text(self, global_settings: GlobalPagerSettings) -> str:
        """Override text, or the global text when the override is empty"""
        return self.next_text or global_settings.next_text


@dataclass(frozen=True, eq=False)
class PagerSettings:
    """Complete pager configuration: one global record plus one record per type"""

    global_settings: GlobalPagerSettings = field(default_factory=GlobalPagerSettings)
    content_types: Mapping[ContentTypeId, ContentTypePagerSettings] = field(
        default_factory=dict
    )

    def __post_init__(self):
        content_types = {
            ContentTypeId.of(ct_id): values for ct_id, values in self.content_types.items()
        }
        object.__setattr__(self, "content_types", MappingProxyType(content_types))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PagerSettings):
            return NotImplemented
        return (
            self.global_settings == other.global_settings
            and dict(self.content_types) == dict(other.content_types)
        )

    @classmethod
    def defaults(cls, content_types: Iterable[ContentType]) -> "PagerSettings":
        """Zero-valued settings for the given content types"""
        return cls(
            global_settings=GlobalPagerSettings(),
            content_types={ct.id: ContentTypePagerSettings() for ct in content_types},
        )

    def for_content_type(self, content_type_id: ContentTypeId) -> ContentTypePagerSettings:
        """Settings of one content type, default-valued when unknown"""
        return self.content_types.get(content_type_id, ContentTypePagerSettings())
