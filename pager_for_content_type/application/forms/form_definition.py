"""
Form definition for the pager settings form

Describes fieldsets and fields as plain data; any host renderer can turn
it into widgets. Field names are the configuration keys, so posted values
map straight back through Submission.from_form_values().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Union

from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.entities.pager_settings import PagerSettings
from pager_for_content_type.infrastructure.utilities.constants import (
    ConfigKeys,
    FormSettings,
    PagerLimits,
)

GLOBAL_FIELDSET = "pager_for_content_type_general"
CONTENT_TYPE_FIELDSET = "pager_for_content_type_content_type"


class FieldType(Enum):
    """Widget kinds used by the form"""

    TEXTFIELD = "textfield"
    CHECKBOX = "checkbox"
    SELECT = "select"


@dataclass(frozen=True)
class FormField:
    """A single input"""

    name: str
    field_type: FieldType
    title: str
    default_value: Any = None
    required: bool = False
    description: Optional[str] = None
    size: Optional[int] = None
    max_length: Optional[int] = None
    options: Optional[dict[int, str]] = None


@dataclass(frozen=True)
class Fieldset:
    """A collapsible group of fields or nested fieldsets"""

    name: str
    title: str
    description: Optional[str] = None
    collapsible: bool = True
    collapsed: bool = False
    children: tuple[Union["Fieldset", FormField], ...] = ()

    def fields(self) -> Iterator[FormField]:
        """All fields below this fieldset, depth first"""
        for child in self.children:
            if isinstance(child, Fieldset):
                yield from child.fields()
            else:
                yield child


@dataclass(frozen=True)
class FormDefinition:
    """The whole settings form"""

    form_id: str
    config_name: str
    fieldsets: tuple[Fieldset, ...] = field(default_factory=tuple)

    def fields(self) -> Iterator[FormField]:
        for fieldset in self.fieldsets:
            yield from fieldset.fields()

    def get_field(self, name: str) -> FormField:
        for form_field in self.fields():
            if form_field.name == name:
                return form_field
        raise KeyError(name)

    def get_fieldset(self, name: str) -> Fieldset:
        pending = list(self.fieldsets)
        while pending:
            fieldset = pending.pop(0)
            if fieldset.name == name:
                return fieldset
            pending.extend(child for child in fieldset.children if isinstance(child, Fieldset))
        raise KeyError(name)

    def default_values(self) -> dict[str, Any]:
        """Field name to default value, i.e. what an untouched form posts"""
        return {form_field.name: form_field.default_value for form_field in self.fields()}


def more_links_options() -> dict[int, str]:
    return {
        count: "Off" if count == 0 else str(count)
        for count in PagerLimits.MORE_LINKS_OPTIONS
    }


def _text_field(name: str, title: str, value: str, required: bool) -> FormField:
    return FormField(
        name=name,
        field_type=FieldType.TEXTFIELD,
        title=title,
        default_value=value,
        required=required,
        size=FormSettings.TEXT_FIELD_SIZE,
        max_length=PagerLimits.MAX_TEXT_LENGTH,
    )


def build_form(content_types: Iterable[ContentType], settings: PagerSettings) -> FormDefinition:
    """Build the settings form for the given content types and current settings"""
    global_fieldset = Fieldset(
        name=GLOBAL_FIELDSET,
        title="Global options",
        description=(
            "These global options are overridden by the content type options. "
            "Available token: [content-type]"
        ),
        children=(
            _text_field(
                ConfigKeys.GLOBAL_PREVIOUS_TEXT,
                '"Previous" text',
                settings.global_settings.previous_text,
                required=True,
            ),
            _text_field(
                ConfigKeys.GLOBAL_NEXT_TEXT,
                '"Next" text',
                settings.global_settings.next_text,
                required=True,
            ),
        ),
    )

    type_fieldsets = []
    for content_type in content_types:
        type_ = content_type.type
        values = settings.for_content_type(content_type.id)
        type_fieldsets.append(
            Fieldset(
                name=type_,
                title=content_type.name,
                children=(
                    FormField(
                        name=ConfigKeys.enabled(type_),
                        field_type=FieldType.CHECKBOX,
                        title="On",
                        default_value=values.enabled,
                    ),
                    FormField(
                        name=ConfigKeys.author(type_),
                        field_type=FieldType.CHECKBOX,
                        title="Pager by node author",
                        default_value=values.pager_by_author,
                    ),
                    _text_field(
                        ConfigKeys.previous_text(type_),
                        '"Previous" text',
                        values.previous_text,
                        required=False,
                    ),
                    _text_field(
                        ConfigKeys.next_text(type_),
                        '"Next" text',
                        values.next_text,
                        required=False,
                    ),
                    FormField(
                        name=ConfigKeys.more_links(type_),
                        field_type=FieldType.SELECT,
                        title="Show more nodes titles after the pager",
                        description="First half before pager, second half after pager",
                        default_value=values.more_links_count,
                        options=more_links_options(),
                    ),
                ),
            )
        )

    content_type_fieldset = Fieldset(
        name=CONTENT_TYPE_FIELDSET,
        title="Content type options",
        description="Pager will be available on checked content types (only in full view mode)",
        children=tuple(type_fieldsets),
    )

    return FormDefinition(
        form_id=FormSettings.FORM_ID,
        config_name=FormSettings.CONFIG_NAME,
        fieldsets=(global_fieldset, content_type_fieldset),
    )
