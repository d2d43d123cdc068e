"""
Settings Form Tests - form definition, form values and form state
"""

from unittest.mock import MagicMock

import pytest

from pager_for_content_type.application.dtos.settings_dtos import (
    ContentTypeSubmission,
    Submission,
)
from pager_for_content_type.application.forms.form_definition import (
    CONTENT_TYPE_FIELDSET,
    GLOBAL_FIELDSET,
    FieldType,
    build_form,
)
from pager_for_content_type.application.forms.settings_form import FormState, SettingsForm
from pager_for_content_type.application.use_cases.pager_settings_use_case import (
    PagerSettingsUseCase,
)
from pager_for_content_type.domain.entities.pager_settings import PagerSettings
from pager_for_content_type.domain.value_objects.content_type_id import ContentTypeId
from pager_for_content_type.infrastructure.utilities.exceptions import StoreUnavailableError


@pytest.fixture
def form_values():
    """Values as posted by a form host"""
    return {
        "pager_for_content_type_previous_text": "« Prev",
        "pager_for_content_type_next_text": "Next »",
        "article_pager_for_content_type_on": "1",
        "article_pager_for_content_type_author": 0,
        "article_pager_for_content_type_previous_text": "",
        "article_pager_for_content_type_next_text": None,
        "article_pager_for_content_type_more_links": "4",
        "page_pager_for_content_type_on": False,
        "page_pager_for_content_type_author": True,
        "page_pager_for_content_type_previous_text": "Older page",
        "page_pager_for_content_type_next_text": "Newer page",
        "page_pager_for_content_type_more_links": 10,
    }


class TestBuildForm:
    """Test the form definition"""

    def test_form_identity(self, content_types):
        form = build_form(content_types, PagerSettings.defaults(content_types))
        assert form.form_id == "pager_for_content_type_settings"
        assert form.config_name == "pager_for_content_type.settings"

    def test_global_fields_are_required(self, content_types):
        form = build_form(content_types, PagerSettings.defaults(content_types))
        fieldset = form.get_fieldset(GLOBAL_FIELDSET)

        assert fieldset.title == "Global options"
        assert "[content-type]" in fieldset.description
        for form_field in fieldset.fields():
            assert form_field.field_type is FieldType.TEXTFIELD
            assert form_field.required is True
            assert form_field.max_length == 64
            assert form_field.size == 30

    def test_one_fieldset_per_content_type(self, content_types):
        form = build_form(content_types, PagerSettings.defaults(content_types))
        container = form.get_fieldset(CONTENT_TYPE_FIELDSET)

        assert [child.name for child in container.children] == ["article", "page"]
        assert form.get_fieldset("page").title == "Basic page"
        assert [f.name for f in form.get_fieldset("article").fields()] == [
            "article_pager_for_content_type_on",
            "article_pager_for_content_type_author",
            "article_pager_for_content_type_previous_text",
            "article_pager_for_content_type_next_text",
            "article_pager_for_content_type_more_links",
        ]

    def test_content_type_field_kinds(self, content_types):
        form = build_form(content_types, PagerSettings.defaults(content_types))

        assert form.get_field("article_pager_for_content_type_on").field_type is FieldType.CHECKBOX
        assert form.get_field("article_pager_for_content_type_author").title == "Pager by node author"
        override = form.get_field("article_pager_for_content_type_previous_text")
        assert override.required is False
        assert override.max_length == 64

    def test_more_links_options(self, content_types):
        form = build_form(content_types, PagerSettings.defaults(content_types))
        select = form.get_field("page_pager_for_content_type_more_links")

        assert select.field_type is FieldType.SELECT
        assert select.options == {0: "Off", 4: "4", 6: "6", 10: "10"}
        assert select.default_value == 0

    def test_defaults_come_from_settings(self, content_types, valid_submission):
        form = build_form(content_types, valid_submission.to_settings())

        assert form.get_field("pager_for_content_type_next_text").default_value == "Next »"
        assert form.get_field("article_pager_for_content_type_on").default_value is True
        assert form.get_field("page_pager_for_content_type_more_links").default_value == 10

    def test_unknown_field(self, content_types):
        form = build_form(content_types, PagerSettings.defaults(content_types))
        with pytest.raises(KeyError):
            form.get_field("blog_pager_for_content_type_on")


class TestSubmissionFromFormValues:
    """Test mapping posted values into a submission"""

    def test_coerces_values(self, form_values, content_types, valid_submission):
        submission = Submission.from_form_values(form_values, content_types)
        assert submission == valid_submission

    def test_missing_values_use_defaults(self, content_types):
        submission = Submission.from_form_values({}, content_types)

        assert submission.previous_text == ""
        assert submission.content_types[ContentTypeId("page")] == ContentTypeSubmission()

    @pytest.mark.parametrize("posted", ["off", "Off", "no", "false", "0", " "])
    def test_unchecked_checkbox_strings(self, form_values, content_types, posted):
        form_values["article_pager_for_content_type_on"] = posted
        submission = Submission.from_form_values(form_values, content_types)

        assert submission.content_types[ContentTypeId("article")].enabled is False

    def test_unparseable_select_is_kept_for_validation(self, form_values, content_types):
        form_values["article_pager_for_content_type_more_links"] = "lots"
        submission = Submission.from_form_values(form_values, content_types)

        assert submission.content_types[ContentTypeId("article")].more_links_count == "lots"

    def test_untouched_form_posts_current_settings(self, content_types, valid_submission):
        """Posting the built form's defaults reproduces the settings"""
        form = build_form(content_types, valid_submission.to_settings())
        submission = Submission.from_form_values(form.default_values(), content_types)

        assert submission == valid_submission

    def test_submission_is_immutable(self, form_values, content_types):
        submission = Submission.from_form_values(form_values, content_types)
        with pytest.raises(AttributeError):
            submission.previous_text = "changed"
        with pytest.raises(TypeError):
            submission.content_types[ContentTypeId("blog")] = ContentTypeSubmission()


class TestSettingsForm:
    """Test the form state machine"""

    @pytest.fixture
    def form(self, use_case):
        return SettingsForm(use_case)

    def test_load_is_clean(self, form):
        settings = form.load()

        assert form.state is FormState.CLEAN
        assert settings.global_settings.previous_text == ""

    def test_successful_submit_returns_to_clean(self, form, form_values, valid_submission):
        response = form.submit(form_values)

        assert response.success is True
        assert response.settings == valid_submission.to_settings()
        assert form.state is FormState.CLEAN
        assert form.errors == {}
        assert form.load() == valid_submission.to_settings()

    def test_invalid_submit_stays_dirty(self, form, form_values):
        form_values["pager_for_content_type_previous_text"] = ""
        form_values["article_pager_for_content_type_more_links"] = "lots"

        response = form.submit(form_values)

        assert response.success is False
        assert form.state is FormState.DIRTY
        assert set(response.errors) == {
            "pager_for_content_type_previous_text",
            "article_pager_for_content_type_more_links",
        }
        assert form.errors == response.errors
        assert response.error_message

    def test_rebuild_after_rejection_keeps_submitted_values(self, form, form_values):
        form_values["pager_for_content_type_next_text"] = "x" * 65
        form.submit(form_values)

        rebuilt = form.build()

        assert form.state is FormState.DIRTY
        assert rebuilt.get_field("pager_for_content_type_next_text").default_value == "x" * 65

    def test_resubmit_after_rejection(self, form, form_values):
        form.submit({**form_values, "pager_for_content_type_next_text": ""})
        response = form.submit(form_values)

        assert response.success is True
        assert form.state is FormState.CLEAN

    def test_build_clean_form(self, form, form_values):
        form.submit(form_values)
        rebuilt = form.build()

        assert form.state is FormState.CLEAN
        assert rebuilt.get_field("article_pager_for_content_type_more_links").default_value == 4

    def test_store_failure_propagates_and_stays_dirty(self, registry, form_values):
        store = MagicMock()
        store.save.side_effect = StoreUnavailableError("down", "save")
        form = SettingsForm(PagerSettingsUseCase(store, registry))

        with pytest.raises(StoreUnavailableError):
            form.submit(form_values)
        assert form.state is FormState.DIRTY
