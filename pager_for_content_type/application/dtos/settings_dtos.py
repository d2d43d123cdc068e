"""
Settings DTOs

Immutable submission values and form responses.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.entities.pager_settings import (
    ContentTypePagerSettings,
    GlobalPagerSettings,
    PagerSettings,
)
from pager_for_content_type.domain.value_objects.content_type_id import ContentTypeId
from pager_for_content_type.infrastructure.utilities.constants import ConfigKeys, PagerLimits
from pager_for_content_type.infrastructure.utilities.helpers import parse_checkbox


@dataclass(frozen=True)
class ContentTypeSubmission:
    """Submitted values for one content type"""
    enabled: bool = False
    pager_by_author: bool = False
    previous_text: Any = ""
    next_text: Any = ""
    more_links_count: Any = PagerLimits.DEFAULT_MORE_LINKS

    def __post_init__(self):
        # A left out override inherits the global text
        for name in ("previous_text", "next_text"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")

    def to_settings(self) -> ContentTypePagerSettings:
        return ContentTypePagerSettings(
            enabled=self.enabled,
            pager_by_author=self.pager_by_author,
            previous_text=self.previous_text,
            next_text=self.next_text,
            more_links_count=self.more_links_count,
        )


@dataclass(frozen=True, eq=False)
class Submission:
    """A complete settings form submission"""
    previous_text: Any
    next_text: Any
    content_types: Mapping[ContentTypeId, ContentTypeSubmission] = field(default_factory=dict)

    def __post_init__(self):
        content_types = {
            ContentTypeId.of(ct_id): values for ct_id, values in self.content_types.items()
        }
        object.__setattr__(self, "content_types", MappingProxyType(content_types))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Submission):
            return NotImplemented
        return (
            self.previous_text == other.previous_text
            and self.next_text == other.next_text
            and dict(self.content_types) == dict(other.content_types)
        )

    def to_settings(self) -> PagerSettings:
        """Settings record this submission writes once validated"""
        return PagerSettings(
            global_settings=GlobalPagerSettings(
                previous_text=self.previous_text, next_text=self.next_text
            ),
            content_types={
                ct_id: values.to_settings() for ct_id, values in self.content_types.items()
            },
        )

    @classmethod
    def from_settings(cls, settings: PagerSettings) -> "Submission":
        """Submission that would store the given settings unchanged"""
        return cls(
            previous_text=settings.global_settings.previous_text,
            next_text=settings.global_settings.next_text,
            content_types={
                ct_id: ContentTypeSubmission(
                    enabled=values.enabled,
                    pager_by_author=values.pager_by_author,
                    previous_text=values.previous_text,
                    next_text=values.next_text,
                    more_links_count=values.more_links_count,
                )
                for ct_id, values in settings.content_types.items()
            },
        )

    @classmethod
    def from_form_values(
        cls, values: Mapping[str, Any], content_types: Iterable[ContentType]
    ) -> "Submission":
        """
        Build a submission from flat form values keyed by configuration key.

        Checkbox values become bools, the more links select becomes an int
        when it parses as one, and missing texts become empty strings.
        Unparseable values are kept as-is so validation can report them.
        """
        per_type = {}
        for content_type in content_types:
            type_ = content_type.type
            per_type[content_type.id] = ContentTypeSubmission(
                enabled=parse_checkbox(values.get(ConfigKeys.enabled(type_))),
                pager_by_author=parse_checkbox(values.get(ConfigKeys.author(type_))),
                previous_text=_text(values.get(ConfigKeys.previous_text(type_))),
                next_text=_text(values.get(ConfigKeys.next_text(type_))),
                more_links_count=_select(values.get(ConfigKeys.more_links(type_))),
            )

        return cls(
            previous_text=_text(values.get(ConfigKeys.GLOBAL_PREVIOUS_TEXT)),
            next_text=_text(values.get(ConfigKeys.GLOBAL_NEXT_TEXT)),
            content_types=per_type,
        )


@dataclass
class SettingsFormResponse:
    """Response for a settings form submission"""
    success: bool
    settings: Optional[PagerSettings] = None
    errors: Dict[str, str] = field(default_factory=dict)
    error_message: Optional[str] = None


def _text(value: Any) -> Any:
    return "" if value is None else value


def _select(value: Any) -> Any:
    if value is None or value == "":
        return PagerLimits.DEFAULT_MORE_LINKS
    if isinstance(value, bool):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return value
