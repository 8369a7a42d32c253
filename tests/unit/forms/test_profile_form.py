"""Tests for ProfileForm."""

from datetime import date, datetime

import pytest

from formcore.config.models.forms import ProfileDefaults, ProfileFormConfig
from formcore.forms import Gender, ProfileForm, UserProfile, default_profile
from formcore.forms.profile import PROFILE_SCHEMA
from formcore.submission import SubmissionAccepted, SubmissionRejected


@pytest.fixture
def committed_profile():
    return UserProfile(
        name="Ada Lovelace",
        title="Analyst",
        gender=Gender.FEMALE,
        date_of_birth=date(1990, 12, 10),
    )


@pytest.fixture
def form(committed_profile, profile_config):
    return ProfileForm(initial=committed_profile, config=profile_config)


class TestDefaults:
    """Starting state of a fresh page view."""

    def test_default_profile_from_config(self):
        config = ProfileFormConfig(
            defaults=ProfileDefaults(name="Sam Lee", title="Engineer", gender="not specified")
        )
        profile = default_profile(config, today=lambda: date(2026, 3, 1))
        assert profile == UserProfile(
            name="Sam Lee",
            title="Engineer",
            gender=Gender.NOT_SPECIFIED,
            date_of_birth=date(2026, 3, 1),
        )

    def test_default_date_of_birth_is_today(self, profile_config):
        form = ProfileForm(config=profile_config)
        assert form.profile.date_of_birth == date.today()
        assert form.profile.title == "Senior front-end engineer"

    def test_pickers_seeded_from_profile(self, form, committed_profile):
        assert form.selected_gender == Gender.FEMALE
        assert form.selected_date_of_birth == committed_profile.date_of_birth
        assert form.values() == committed_profile.model_dump()

    def test_editor_starts_closed(self, form):
        assert form.editing is False


class TestPickers:
    """Pickers write into the edited record, one way."""

    def test_date_picker_overwrites_record(self, form):
        form.pick_date_of_birth(date(1985, 7, 4))
        assert form.get("date_of_birth") == date(1985, 7, 4)

    def test_empty_date_emission_ignored(self, form):
        form.pick_date_of_birth(None)
        assert form.selected_date_of_birth == date(1990, 12, 10)
        assert form.get("date_of_birth") == date(1990, 12, 10)

    def test_gender_select_overwrites_record(self, form):
        form.pick_gender(Gender.MALE)
        assert form.get("gender") == Gender.MALE

    def test_typed_record_edit_does_not_move_picker(self, form):
        form.set("gender", "male")
        assert form.selected_gender == Gender.FEMALE


class TestSubmit:
    """Saving the profile."""

    def test_save_edits(self, form):
        form.open_editor()
        form.set("name", "Grace Hopper")
        form.pick_gender("not specified")
        form.pick_date_of_birth(date(1906, 12, 9))
        outcome = form.submit()

        assert isinstance(outcome, SubmissionAccepted)
        assert form.profile == UserProfile(
            name="Grace Hopper",
            title="Analyst",
            gender=Gender.NOT_SPECIFIED,
            date_of_birth=date(1906, 12, 9),
        )

    def test_empty_name_rejected(self, form, committed_profile):
        form.open_editor()
        form.set("name", "")
        form.set("title", "")
        outcome = form.submit()

        assert isinstance(outcome, SubmissionRejected)
        assert outcome.errors.errors == {
            "name": "name is a required field",
            "title": "title is a required field",
        }
        assert form.profile == committed_profile

    def test_invalid_gender_rejected(self, form):
        form.pick_gender("other")
        outcome = form.submit()
        assert outcome.errors.get("gender") == (
            "gender must be one of the following values: male, female, not specified"
        )

    def test_unparseable_date_rejected(self, form):
        form.set("date_of_birth", "someday")
        outcome = form.submit()
        assert outcome.errors.get("date_of_birth") == "date_of_birth must be a `date` type"

    def test_datetime_and_iso_string_coerced_to_date(self, form):
        form.pick_date_of_birth(datetime(1970, 1, 2, 15, 30))
        assert form.submit().ok is True
        assert form.profile.date_of_birth == date(1970, 1, 2)

        form.set("date_of_birth", "1971-03-04")
        assert form.submit().ok is True
        assert form.profile.date_of_birth == date(1971, 3, 4)

    def test_schema_validates_committed_profile(self, committed_profile):
        assert PROFILE_SCHEMA.validate(committed_profile.model_dump()).is_valid


class TestEditorLifecycle:
    """Reopening resets transient state from the committed profile."""

    def test_toggle(self, form):
        assert form.toggle_editor() is True
        assert form.editing is True
        assert form.toggle_editor() is False

    def test_reopen_discards_unsaved_edits(self, form, committed_profile):
        form.open_editor()
        form.set("name", "")
        form.pick_gender(Gender.MALE)
        form.pick_date_of_birth(date(2001, 1, 1))
        form.submit()
        assert "name" in form.errors

        form.close_editor()
        form.open_editor()

        assert form.values() == committed_profile.model_dump()
        assert form.errors.is_valid
        assert form.submitted is False
        assert form.selected_gender == Gender.FEMALE
        assert form.selected_date_of_birth == date(1990, 12, 10)

    def test_reopen_seeds_from_latest_commit(self, form):
        form.open_editor()
        form.pick_gender(Gender.MALE)
        form.pick_date_of_birth(date(1980, 1, 1))
        form.submit()

        form.set("name", "unsaved")
        form.toggle_editor()
        form.toggle_editor()

        assert form.get("name") == "Ada Lovelace"
        assert form.selected_gender == Gender.MALE
        assert form.selected_date_of_birth == date(1980, 1, 1)

    def test_no_revalidation_after_reopen_until_submit(self, form):
        form.set("name", "")
        form.submit()
        form.open_editor()
        form.set("title", "")
        assert form.errors.is_valid


def test_display_date_of_birth(form):
    assert form.display_date_of_birth() == "Dec 10, 1990"
