"""Loading and strict validation for applicant profile files."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..domain.profile import EducationLevel, LanguageLevel, OccupationCategory, Profile
from ..exceptions import ProfileFileNotFoundError, ProfileFileValidationError
from ..protocols import FileSystem


class _ProfileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    age: int
    education: str
    language_english: str
    language_french: str = LanguageLevel.NONE.value
    years_canadian_experience: int = 0
    years_foreign_experience: int = 0
    has_certificate_of_qualification: bool = False
    has_provincial_nomination: bool = False
    has_sibling_in_canada: bool = False
    occupation_category: str = OccupationCategory.GENERAL.value

    @field_validator("age", "years_canadian_experience", "years_foreign_experience")
    @classmethod
    def _validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError
        return value

    @field_validator("education")
    @classmethod
    def _validate_education(cls, value: str) -> str:
        level = EducationLevel.from_label(value)
        if level is None:
            raise ValueError
        return level.value

    @field_validator("language_english", "language_french")
    @classmethod
    def _validate_language(cls, value: str) -> str:
        level = LanguageLevel.from_label(value)
        if level is None:
            raise ValueError
        return level.value

    @field_validator("occupation_category")
    @classmethod
    def _validate_category(cls, value: str) -> str:
        category = OccupationCategory.from_label(value)
        if category is None:
            raise ValueError
        return category.value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _to_domain_profile(model: _ProfileModel) -> Profile:
    return Profile(
        age=model.age,
        education=EducationLevel(model.education),
        language_english=LanguageLevel(model.language_english),
        language_french=LanguageLevel(model.language_french),
        years_canadian_experience=model.years_canadian_experience,
        years_foreign_experience=model.years_foreign_experience,
        has_certificate_of_qualification=model.has_certificate_of_qualification,
        has_provincial_nomination=model.has_provincial_nomination,
        has_sibling_in_canada=model.has_sibling_in_canada,
        occupation_category=OccupationCategory(model.occupation_category),
    )


def load_profile(*, path: Path, fs: FileSystem) -> Profile:
    """Load and validate an applicant profile from JSON."""
    if not fs.exists(path):
        raise ProfileFileNotFoundError(str(path))

    payload = fs.read_text(path)
    try:
        model = _ProfileModel.model_validate_json(payload)
    except ValidationError as exc:
        raise ProfileFileValidationError(str(path), _format_validation_error(exc)) from exc

    return _to_domain_profile(model)
