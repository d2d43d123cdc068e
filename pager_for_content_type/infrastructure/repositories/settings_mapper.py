"""
Mapping between structured pager settings and flat configuration keys

Structured settings are only flattened here, at the storage boundary.
"""

import logging
from typing import Any, Dict, Iterable

from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.entities.pager_settings import (
    ContentTypePagerSettings,
    GlobalPagerSettings,
    PagerSettings,
)
from pager_for_content_type.domain.repositories.config_store import ConfigStore
from pager_for_content_type.infrastructure.utilities.constants import ConfigKeys, PagerLimits
from pager_for_content_type.infrastructure.utilities.helpers import parse_checkbox

logger = logging.getLogger(__name__)


def settings_to_flat_keys(settings: PagerSettings) -> Dict[str, Any]:
    """Flatten settings into the configuration key names the feature owns"""
    values: Dict[str, Any] = {
        ConfigKeys.GLOBAL_PREVIOUS_TEXT: settings.global_settings.previous_text,
        ConfigKeys.GLOBAL_NEXT_TEXT: settings.global_settings.next_text,
    }
    for content_type_id, type_settings in settings.content_types.items():
        type_ = content_type_id.value
        values[ConfigKeys.enabled(type_)] = type_settings.enabled
        values[ConfigKeys.author(type_)] = type_settings.pager_by_author
        values[ConfigKeys.previous_text(type_)] = type_settings.previous_text
        values[ConfigKeys.next_text(type_)] = type_settings.next_text
        values[ConfigKeys.more_links(type_)] = type_settings.more_links_count
    return values


def settings_from_store(
    store: ConfigStore, content_types: Iterable[ContentType]
) -> PagerSettings:
    """Read settings for the given content types, defaulting missing keys"""
    stored = store.get_all()
    global_settings = GlobalPagerSettings(
        previous_text=_as_text(stored.get(ConfigKeys.GLOBAL_PREVIOUS_TEXT)),
        next_text=_as_text(stored.get(ConfigKeys.GLOBAL_NEXT_TEXT)),
    )

    per_type = {}
    for content_type in content_types:
        type_ = content_type.type
        per_type[content_type.id] = ContentTypePagerSettings(
            enabled=parse_checkbox(stored.get(ConfigKeys.enabled(type_))),
            pager_by_author=parse_checkbox(stored.get(ConfigKeys.author(type_))),
            previous_text=_as_text(stored.get(ConfigKeys.previous_text(type_))),
            next_text=_as_text(stored.get(ConfigKeys.next_text(type_))),
            more_links_count=_as_more_links(
                stored.get(ConfigKeys.more_links(type_)), ConfigKeys.more_links(type_)
            ),
        )

    return PagerSettings(global_settings=global_settings, content_types=per_type)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_more_links(value: Any, key: str) -> int:
    if value is None or value == "":
        return PagerLimits.DEFAULT_MORE_LINKS
    try:
        count = int(value)
    except (TypeError, ValueError):
        count = None
    if count not in PagerLimits.MORE_LINKS_OPTIONS:
        logger.warning("Ignoring invalid stored value %r for %s", value, key)
        return PagerLimits.DEFAULT_MORE_LINKS
    return count
