"""Enums for the forms domain."""

from enum import Enum


class Gender(str, Enum):
    """Gender choices offered by the profile form."""

    MALE = "male"
    FEMALE = "female"
    NOT_SPECIFIED = "not specified"


class AuxiliaryKey(str, Enum):
    """UI-only selections that feed a record field."""

    DATE_OF_BIRTH = "date_of_birth_picker"
    GENDER = "gender_select"
