"""Preset profiles for common study-to-PR pathways."""

from __future__ import annotations

from types import MappingProxyType

from ..exceptions import ScenarioNotFoundError
from .profile import EducationLevel, LanguageLevel, OccupationCategory, Profile

SCENARIOS: MappingProxyType[str, Profile] = MappingProxyType(
    {
        # STEM PhD with research-assistant or post-doc work
        "phd": Profile(
            age=28,
            education=EducationLevel.DOCTORATE,
            language_english=LanguageLevel.ADVANCED,
            language_french=LanguageLevel.NONE,
            years_canadian_experience=1,
            years_foreign_experience=0,
            occupation_category=OccupationCategory.STEM,
        ),
        # Two-year college diploma plus French, targeting French rounds
        "diploma": Profile(
            age=24,
            education=EducationLevel.TWO_YEAR,
            language_english=LanguageLevel.INTERMEDIATE,
            language_french=LanguageLevel.INTERMEDIATE,
            years_canadian_experience=1,
            years_foreign_experience=0,
            occupation_category=OccupationCategory.FRENCH,
        ),
        # STEM undergraduate with co-op and post-graduation work
        "bachelor": Profile(
            age=23,
            education=EducationLevel.BACHELOR,
            language_english=LanguageLevel.ADVANCED,
            language_french=LanguageLevel.NONE,
            years_canadian_experience=1,
            years_foreign_experience=0,
            occupation_category=OccupationCategory.STEM,
        ),
    }
)


def get_scenario(name: str) -> Profile:
    """Return a preset profile by name (case-insensitive)."""
    key = name.strip().lower()
    if key not in SCENARIOS:
        raise ScenarioNotFoundError(name, tuple(sorted(SCENARIOS)))
    return SCENARIOS[key]
