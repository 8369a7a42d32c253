"""Profile editing form.

The committed profile is displayed read-only; the edit view is toggled
open and closed. Gender comes from a select box and date of birth from a
date picker, both of which write into the edited record.
"""

from collections.abc import Callable
from datetime import date

from formcore.config import get_settings
from formcore.config.models.forms import ProfileFormConfig
from formcore.forms.base import FormController
from formcore.forms.enums import AuxiliaryKey, Gender
from formcore.forms.models import UserProfile
from formcore.observability.logging import get_logger
from formcore.store.field_store import FieldStore
from formcore.submission.pipeline import SubmissionPipeline
from formcore.validation.enums import ValueKind
from formcore.validation.models import FieldSchema
from formcore.validation.rules import is_date, one_of, required
from formcore.validation.schema import FormSchema

logger = get_logger(__name__)

PROFILE_FIELDS = ("name", "title", "gender", "date_of_birth")

PROFILE_SCHEMA = FormSchema(
    "profile",
    [
        FieldSchema(name="name", rules=(required(),)),
        FieldSchema(name="title", rules=(required(),)),
        FieldSchema(
            name="gender",
            kind=ValueKind.ENUM,
            rules=(required(), one_of(Gender)),
        ),
        FieldSchema(
            name="date_of_birth",
            kind=ValueKind.DATE,
            rules=(required(), is_date()),
        ),
    ],
)


def default_profile(
    config: ProfileFormConfig,
    today: Callable[[], date] = date.today,
) -> UserProfile:
    """Starting profile for a fresh page view."""
    defaults = config.defaults
    return UserProfile(
        name=defaults.name,
        title=defaults.title,
        gender=Gender(defaults.gender),
        date_of_birth=today(),
    )


class ProfileForm(FormController[UserProfile]):
    """Profile view with a toggleable edit form."""

    def __init__(
        self,
        initial: UserProfile | None = None,
        schema: FormSchema | None = None,
        config: ProfileFormConfig | None = None,
    ) -> None:
        config = config or get_settings().forms.profile
        schema = schema or PROFILE_SCHEMA
        initial = initial or default_profile(config)

        store = FieldStore(PROFILE_FIELDS, initial=initial.model_dump())
        pipeline = SubmissionPipeline(schema, UserProfile, initial=initial)
        super().__init__(schema, store, pipeline, config.revalidate_on_change)

        store.bind_auxiliary(AuxiliaryKey.DATE_OF_BIRTH, "date_of_birth")
        store.bind_auxiliary(AuxiliaryKey.GENDER, "gender")
        self._seed_pickers(initial)
        self._editing = False

    @property
    def profile(self) -> UserProfile:
        """The committed profile shown in the header card."""
        return self.pipeline.committed

    @property
    def editing(self) -> bool:
        return self._editing

    @property
    def selected_date_of_birth(self) -> date | None:
        return self.store.selection(AuxiliaryKey.DATE_OF_BIRTH)

    @property
    def selected_gender(self) -> Gender | str | None:
        return self.store.selection(AuxiliaryKey.GENDER)

    def _seed_pickers(self, profile: UserProfile) -> None:
        self.store.seed_auxiliary({
            AuxiliaryKey.DATE_OF_BIRTH: profile.date_of_birth,
            AuxiliaryKey.GENDER: profile.gender,
        })

    def open_editor(self) -> None:
        """Open the edit view against the committed profile.

        Discards any earlier unsaved edits, errors and picker selections.
        """
        profile = self.profile
        self._reset_errors()
        self.store.clear_selections()
        self.store.replace(profile.model_dump())
        self._seed_pickers(profile)
        self._editing = True
        logger.debug("profile_editor_opened")

    def close_editor(self) -> None:
        self._editing = False

    def toggle_editor(self) -> bool:
        if self._editing:
            self.close_editor()
        else:
            self.open_editor()
        return self._editing

    def pick_date_of_birth(self, value: date | None) -> None:
        """Date picker emission; an empty emission is ignored."""
        if value is None:
            return
        self.store.select(AuxiliaryKey.DATE_OF_BIRTH, value)

    def pick_gender(self, value: Gender | str | None) -> None:
        """Select box emission."""
        self.store.select(AuxiliaryKey.GENDER, value)

    def display_date_of_birth(self) -> str:
        """Committed date of birth in the localized long form, e.g. 'Sep 4, 1986'."""
        dob = self.profile.date_of_birth
        return f"{dob.strftime('%b')} {dob.day}, {dob.year}"
