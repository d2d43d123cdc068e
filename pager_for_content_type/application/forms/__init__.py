"""
Forms

Renderer-agnostic description of the pager settings form and the
form controller driving load and submit.
"""

from .form_definition import FieldType, Fieldset, FormDefinition, FormField, build_form
from .settings_form import FormState, SettingsForm

__all__ = [
    "FieldType",
    "Fieldset",
    "FormDefinition",
    "FormField",
    "FormState",
    "SettingsForm",
    "build_form",
]
