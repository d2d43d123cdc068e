"""
Settings form controller

Drives the load/submit cycle of the pager settings form and tracks
whether the form still matches the store.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pager_for_content_type.application.dtos.settings_dtos import (
    SettingsFormResponse,
    Submission,
)
from pager_for_content_type.application.forms.form_definition import (
    FormDefinition,
    build_form,
)
from pager_for_content_type.application.use_cases.pager_settings_use_case import (
    PagerSettingsUseCase,
)
from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.entities.pager_settings import PagerSettings
from pager_for_content_type.infrastructure.utilities.exceptions import ValidationError


class FormState(Enum):
    """Form lifecycle states"""

    CLEAN = "clean"  # matches the store
    DIRTY = "dirty"  # submission pending or rejected


class SettingsForm:
    """Pager settings form bound to one request"""

    def __init__(self, use_case: PagerSettingsUseCase):
        self._use_case = use_case
        self._logger = logging.getLogger(self.__class__.__name__)
        self.state = FormState.CLEAN
        self.errors: Dict[str, str] = {}
        self.submitted_values: Dict[str, Any] = {}
        self._content_types: Optional[List[ContentType]] = None

    @property
    def content_types(self) -> List[ContentType]:
        if self._content_types is None:
            self._content_types = self._use_case.list_content_types()
        return self._content_types

    def load(self) -> PagerSettings:
        """Load the stored settings and reset the form"""
        settings = self._use_case.load_settings(self.content_types)
        self.state = FormState.CLEAN
        self.errors = {}
        self.submitted_values = {}
        return settings

    def build(self) -> FormDefinition:
        """Form definition pre-filled with stored values (or the rejected ones)"""
        if self.state is FormState.DIRTY and self.submitted_values:
            submission = Submission.from_form_values(self.submitted_values, self.content_types)
            return build_form(self.content_types, submission.to_settings())
        return build_form(self.content_types, self.load())

    def submit(self, values: Mapping[str, Any]) -> SettingsFormResponse:
        """
        Apply posted form values.

        Validation failures leave the form DIRTY with errors recorded for
        re-prompting; store failures propagate.
        """
        self.state = FormState.DIRTY
        self.submitted_values = dict(values)
        submission = Submission.from_form_values(values, self.content_types)

        try:
            settings = self._use_case.apply_settings(submission)
        except ValidationError as e:
            self.errors = e.errors
            self._logger.info("Settings form rejected with %d errors", len(e.errors))
            return SettingsFormResponse(
                success=False, errors=e.errors, error_message=e.user_message
            )

        self.state = FormState.CLEAN
        self.errors = {}
        self.submitted_values = {}
        return SettingsFormResponse(success=True, settings=settings)
