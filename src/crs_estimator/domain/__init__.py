"""Domain modules for the CRS estimator."""

from .eligibility import Draw, DrawDataset, DrawType, matching_draws
from .profile import EducationLevel, LanguageLevel, OccupationCategory, Profile
from .scoring import ScoreBreakdown, ScoreResult, calculate_score

__all__ = [
    "Draw",
    "DrawDataset",
    "DrawType",
    "EducationLevel",
    "LanguageLevel",
    "OccupationCategory",
    "Profile",
    "ScoreBreakdown",
    "ScoreResult",
    "calculate_score",
    "matching_draws",
]
