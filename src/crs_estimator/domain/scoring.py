"""Domain scoring rules for the simplified single-applicant CRS estimate.

Usage example:
    from crs_estimator.domain.profile import EducationLevel, LanguageLevel, Profile
    from crs_estimator.domain.scoring import calculate_score

    profile = Profile(
        age=29,
        education=EducationLevel.BACHELOR,
        language_english=LanguageLevel.INTERMEDIATE,
        language_french=LanguageLevel.NONE,
        years_canadian_experience=0,
        years_foreign_experience=1,
    )

    result = calculate_score(profile)
    assert result.total == 372
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .profile import EducationLevel, LanguageLevel, Profile

# Age → points; ages outside 18–44 score nothing
AGE_POINTS: MappingProxyType[int, int] = MappingProxyType(
    {
        18: 99,
        19: 105,
        **{age: 110 for age in range(20, 30)},
        30: 105,
        31: 99,
        32: 94,
        33: 88,
        34: 83,
        35: 77,
        36: 72,
        37: 66,
        38: 61,
        39: 55,
        40: 50,
        41: 39,
        42: 28,
        43: 17,
        44: 6,
    }
)

EDUCATION_POINTS: MappingProxyType[EducationLevel, int] = MappingProxyType(
    {
        EducationLevel.NONE: 0,
        EducationLevel.SECONDARY: 30,
        EducationLevel.ONE_YEAR: 90,
        EducationLevel.TWO_YEAR: 98,
        EducationLevel.BACHELOR: 120,
        EducationLevel.TWO_OR_MORE: 128,
        EducationLevel.MASTER: 135,
        EducationLevel.DOCTORATE: 150,
    }
)

# Four skills at one tier: advanced ~CLB 10 (34 x 4), intermediate ~CLB 8 (23 x 4),
# beginner ~CLB 7 (17 x 4)
FIRST_LANGUAGE_POINTS: MappingProxyType[LanguageLevel, int] = MappingProxyType(
    {
        LanguageLevel.NONE: 0,
        LanguageLevel.BEGINNER: 68,
        LanguageLevel.INTERMEDIATE: 92,
        LanguageLevel.ADVANCED: 136,
    }
)

# Max 6 per skill
SECOND_LANGUAGE_POINTS: MappingProxyType[LanguageLevel, int] = MappingProxyType(
    {
        LanguageLevel.NONE: 0,
        LanguageLevel.BEGINNER: 4,
        LanguageLevel.INTERMEDIATE: 12,
        LanguageLevel.ADVANCED: 24,
    }
)

# Years of Canadian work → points; 5+ years is the top step
CANADIAN_EXPERIENCE_POINTS: tuple[int, ...] = (0, 40, 53, 64, 72, 80)

CORE_MAX = 500
TRANSFERABILITY_MAX = 100

FULL_COMBINATION_POINTS = 50
PARTIAL_COMBINATION_POINTS = 25
STRONG_CANADIAN_YEARS = 2
STRONG_FOREIGN_YEARS = 3
SOME_FOREIGN_YEARS = 1

TOP_EDUCATION = frozenset(
    {EducationLevel.TWO_OR_MORE, EducationLevel.MASTER, EducationLevel.DOCTORATE}
)
PARTIAL_EDUCATION = frozenset({EducationLevel.BACHELOR, EducationLevel.TWO_YEAR})

PROVINCIAL_NOMINATION_POINTS = 600
SIBLING_POINTS = 15
FRENCH_WITH_ENGLISH_POINTS = 50
FRENCH_ONLY_POINTS = 25


@dataclass(frozen=True)
class ScoreBreakdown:
    """Subtotals and per-factor contributions behind a CRS total."""

    core: int  # capped at 500
    transferability: int  # capped at 100
    additional: int  # uncapped
    age: int
    education: int
    language: int  # first + second language
    canadian_work: int


@dataclass(frozen=True)
class ScoreResult:
    """CRS total with its breakdown."""

    total: int
    breakdown: ScoreBreakdown


def age_points(age: int) -> int:
    """Points for age; 0 below 18 and from 45."""
    return AGE_POINTS.get(age, 0)


def education_points(level: EducationLevel) -> int:
    return EDUCATION_POINTS[level]


def first_language_points(level: LanguageLevel) -> int:
    return FIRST_LANGUAGE_POINTS[level]


def second_language_points(level: LanguageLevel) -> int:
    return SECOND_LANGUAGE_POINTS[level]


def canadian_experience_points(years: int) -> int:
    """Points for years of Canadian work experience."""
    if years <= 0:
        return 0
    return CANADIAN_EXPERIENCE_POINTS[min(years, len(CANADIAN_EXPERIENCE_POINTS) - 1)]


def _combination(strong: bool, full: bool, partial: bool) -> int:
    if strong and full:
        return FULL_COMBINATION_POINTS
    if strong and partial:
        return PARTIAL_COMBINATION_POINTS
    return 0


def transferability_points(profile: Profile) -> int:
    """Skill transferability from four pairings of strong factors, capped at 100.

    Strong language is judged on English only.
    """
    strong_language = profile.language_english.is_strong
    strong_canadian = profile.years_canadian_experience >= STRONG_CANADIAN_YEARS
    top_education = profile.education in TOP_EDUCATION
    partial_education = profile.education in PARTIAL_EDUCATION
    strong_foreign = profile.years_foreign_experience >= STRONG_FOREIGN_YEARS
    some_foreign = profile.years_foreign_experience >= SOME_FOREIGN_YEARS

    points = (
        _combination(strong_language, top_education, partial_education)
        + _combination(strong_canadian, top_education, partial_education)
        + _combination(strong_language, strong_foreign, some_foreign)
        + _combination(strong_canadian, strong_foreign, some_foreign)
    )
    return min(points, TRANSFERABILITY_MAX)


def additional_points(profile: Profile) -> int:
    """Nomination, sibling and French-ability bonuses (no cap)."""
    points = 0
    if profile.has_provincial_nomination:
        points += PROVINCIAL_NOMINATION_POINTS
    if profile.has_sibling_in_canada:
        points += SIBLING_POINTS
    if profile.language_french.is_strong:
        if profile.language_english is not LanguageLevel.NONE:
            points += FRENCH_WITH_ENGLISH_POINTS
        else:
            points += FRENCH_ONLY_POINTS
    return points


def calculate_score(profile: Profile) -> ScoreResult:
    """Calculate the CRS estimate for a profile.

    The first-language column always scores English and French is always the
    second language, whichever the applicant considers dominant. The grand
    total has no upper bound.
    """
    age = age_points(profile.age)
    education = education_points(profile.education)
    language = first_language_points(profile.language_english) + second_language_points(
        profile.language_french
    )
    canadian_work = canadian_experience_points(profile.years_canadian_experience)

    core = min(age + education + language + canadian_work, CORE_MAX)
    transferability = transferability_points(profile)
    additional = additional_points(profile)

    return ScoreResult(
        total=core + transferability + additional,
        breakdown=ScoreBreakdown(
            core=core,
            transferability=transferability,
            additional=additional,
            age=age,
            education=education,
            language=language,
            canadian_work=canadian_work,
        ),
    )
