"""Applicant profile and the closed tier sets it is built from.

Usage example:
    from crs_estimator.domain.profile import (
        EducationLevel,
        LanguageLevel,
        OccupationCategory,
        Profile,
    )

    profile = Profile(
        age=29,
        education=EducationLevel.BACHELOR,
        language_english=LanguageLevel.INTERMEDIATE,
        language_french=LanguageLevel.NONE,
        years_canadian_experience=0,
        years_foreign_experience=1,
        occupation_category=OccupationCategory.GENERAL,
    )
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from ..exceptions import InvalidProfileError

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def _compact(text: str) -> str:
    return _NON_ALNUM_RE.sub("", text.strip().lower())


class LabelEnum(StrEnum):
    """String enum that parses loosely formatted labels such as ``Two-Year``."""

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}

    @classmethod
    def from_label(cls, text: str) -> Self | None:
        """Resolve a label to a member, ignoring case, spaces, hyphens and underscores."""
        key = _compact(text)
        key = cls._aliases().get(key, key)
        for member in cls:
            if _compact(member.value) == key:
                return member
        return None

    @classmethod
    def parse(cls, text: str, *, field_name: str = "value") -> Self:
        """Like ``from_label`` but raises ``InvalidProfileError`` for unknown labels."""
        member = cls.from_label(text)
        if member is not None:
            return member
        raise InvalidProfileError(
            field_name,
            text,
            f"expected one of {', '.join(member.value for member in cls)}",
        )


class EducationLevel(LabelEnum):
    """Highest completed credential, in ascending order."""

    NONE = "none"
    SECONDARY = "secondary"
    ONE_YEAR = "one_year"
    TWO_YEAR = "two_year"
    BACHELOR = "bachelor"
    TWO_OR_MORE = "two_or_more"
    MASTER = "master"
    DOCTORATE = "doctorate"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"phd": "doctorate", "highschool": "secondary", "masters": "master"}

    @property
    def rank(self) -> int:
        return list(EducationLevel).index(self)


class LanguageLevel(LabelEnum):
    """Approximate proficiency tier standing in for CLB/NCLC benchmarks."""

    NONE = "none"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def is_strong(self) -> bool:
        """Intermediate or better (roughly CLB 7+)."""
        return self in (LanguageLevel.INTERMEDIATE, LanguageLevel.ADVANCED)


class OccupationCategory(LabelEnum):
    """Occupation the applicant targets for category-based rounds."""

    GENERAL = "General"
    FRENCH = "French"
    STEM = "STEM"
    HEALTHCARE = "Healthcare"
    TRADES = "Trades"
    TRANSPORT = "Transport"
    AGRICULTURE = "Agriculture"


@dataclass(frozen=True)
class Profile:
    """Single-applicant profile scored by the CRS estimator.

    Construction fails with ``InvalidProfileError`` for negative or non-integer
    counts and for tier values that are not enum members; nothing is clamped.
    ``has_certificate_of_qualification`` is carried but does not score.
    """

    age: int
    education: EducationLevel
    language_english: LanguageLevel
    language_french: LanguageLevel
    years_canadian_experience: int
    years_foreign_experience: int
    has_certificate_of_qualification: bool = False
    has_provincial_nomination: bool = False
    has_sibling_in_canada: bool = False
    occupation_category: OccupationCategory = OccupationCategory.GENERAL

    def __post_init__(self) -> None:
        for name in ("age", "years_canadian_experience", "years_foreign_experience"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidProfileError(name, value, "must be an integer")
            if value < 0:
                raise InvalidProfileError(name, value, "must not be negative")

        tiers: tuple[tuple[str, type[StrEnum]], ...] = (
            ("education", EducationLevel),
            ("language_english", LanguageLevel),
            ("language_french", LanguageLevel),
            ("occupation_category", OccupationCategory),
        )
        for name, enum_cls in tiers:
            value = getattr(self, name)
            if not isinstance(value, enum_cls):
                raise InvalidProfileError(name, value, f"must be a {enum_cls.__name__}")

        for name in (
            "has_certificate_of_qualification",
            "has_provincial_nomination",
            "has_sibling_in_canada",
        ):
            if not isinstance(getattr(self, name), bool):
                raise InvalidProfileError(name, getattr(self, name), "must be a boolean")
