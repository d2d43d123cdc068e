"""
Pager settings use case

Loads the pager configuration for the current content types and applies
complete form submissions to the configuration store.
"""

import logging
from typing import Dict, Iterable, Optional

from pager_for_content_type.application.dtos.settings_dtos import (
    ContentTypeSubmission,
    Submission,
)
from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.entities.pager_settings import PagerSettings
from pager_for_content_type.domain.repositories.config_store import ConfigStore
from pager_for_content_type.domain.repositories.content_type_registry import ContentTypeRegistry
from pager_for_content_type.domain.value_objects.more_links_count import MoreLinksCount
from pager_for_content_type.domain.value_objects.pager_text import PagerText
from pager_for_content_type.infrastructure.logging.logging_config import PerformanceLogger
from pager_for_content_type.infrastructure.repositories.settings_mapper import (
    settings_from_store,
    settings_to_flat_keys,
)
from pager_for_content_type.infrastructure.utilities.constants import ConfigKeys
from pager_for_content_type.infrastructure.utilities.exceptions import ValidationError


class PagerSettingsUseCase:
    """
    Use case for the pager settings

    Handles:
    1. Loading stored settings, defaulting content types never saved before
    2. Validating a complete submission
    3. Overwriting every owned key in one save
    """

    def __init__(self, config_store: ConfigStore, content_type_registry: ContentTypeRegistry):
        self._config_store = config_store
        self._content_type_registry = content_type_registry
        self._logger = logging.getLogger(self.__class__.__name__)

    def list_content_types(self) -> list[ContentType]:
        return self._content_type_registry.list_content_types()

    def load_settings(
        self, content_types: Optional[Iterable[ContentType]] = None
    ) -> PagerSettings:
        """Load settings for the given content types (default: all registered)"""
        if content_types is None:
            content_types = self.list_content_types()
        content_types = list(content_types)

        with PerformanceLogger(
            "load_pager_settings",
            self._logger,
            {"content_type_count": len(content_types)},
        ):
            return settings_from_store(self._config_store, content_types)

    def validate(self, submission: Submission) -> Dict[str, str]:
        """Return offending configuration keys mapped to error messages"""
        errors: Dict[str, str] = {}

        for key, value in (
            (ConfigKeys.GLOBAL_PREVIOUS_TEXT, submission.previous_text),
            (ConfigKeys.GLOBAL_NEXT_TEXT, submission.next_text),
        ):
            try:
                PagerText.required(value)
            except ValueError as e:
                errors[key] = str(e)

        for content_type_id, values in submission.content_types.items():
            errors.update(self._validate_content_type(content_type_id.value, values))

        return errors

    def apply_settings(self, submission: Submission) -> PagerSettings:
        """
        Validate then overwrite the whole pager configuration.

        Raises:
            ValidationError: If any field is invalid; nothing is written.
            StoreUnavailableError: If the store cannot be written.
        """
        errors = self.validate(submission)
        if errors:
            self._logger.warning(
                "Rejected pager settings submission: %s", ", ".join(errors)
            )
            raise ValidationError(errors)

        settings = submission.to_settings()
        with PerformanceLogger(
            "apply_pager_settings",
            self._logger,
            {"content_type_count": len(settings.content_types)},
        ):
            for key, value in settings_to_flat_keys(settings).items():
                self._config_store.set(key, value)
            self._config_store.save()

        self._logger.info(
            "Pager settings saved for %d content types", len(settings.content_types)
        )
        return settings

    @staticmethod
    def _validate_content_type(type_: str, values: ContentTypeSubmission) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for key, flag in (
            (ConfigKeys.enabled(type_), values.enabled),
            (ConfigKeys.author(type_), values.pager_by_author),
        ):
            if not isinstance(flag, bool):
                errors[key] = "Value must be a boolean"

        for key, text in (
            (ConfigKeys.previous_text(type_), values.previous_text),
            (ConfigKeys.next_text(type_), values.next_text),
        ):
            try:
                PagerText(text)
            except ValueError as e:
                errors[key] = str(e)

        try:
            MoreLinksCount(values.more_links_count)
        except ValueError as e:
            errors[ConfigKeys.more_links(type_)] = str(e)

        return errors
