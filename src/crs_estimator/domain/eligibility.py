"""Invitation-round records and the rules that match a score against them.

Usage example:
    from crs_estimator.domain.draw_history import HISTORICAL_DRAWS
    from crs_estimator.domain.eligibility import matching_draws

    eligible = matching_draws(result.total, profile.occupation_category, profile, HISTORICAL_DRAWS)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..exceptions import (
    DuplicateDrawIdError,
    NegativeDrawInvitationsError,
    NegativeDrawScoreError,
)
from .profile import LabelEnum, OccupationCategory, Profile

CEC_MIN_CANADIAN_YEARS = 1


class DrawType(LabelEnum):
    """Category tag of an invitation round."""

    GENERAL = "General"
    FRENCH = "French"
    STEM = "STEM"
    HEALTHCARE = "Healthcare"
    TRADES = "Trades"
    TRANSPORT = "Transport"
    AGRICULTURE = "Agriculture"
    CEC = "CEC"
    PNP = "PNP"
    FSW = "FSW"
    EDUCATION = "Education"


@dataclass(frozen=True)
class Draw:
    """One historical Express Entry invitation round."""

    id: str
    date: str  # ISO calendar date
    type: DrawType
    score: int  # cutoff CRS
    invitations: int


@dataclass(frozen=True)
class DrawDataset:
    """Ordered, read-only set of draws, most recent first."""

    draws: tuple[Draw, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for draw in self.draws:
            if draw.id in seen:
                raise DuplicateDrawIdError(draw.id)
            if draw.score < 0:
                raise NegativeDrawScoreError(draw.id, draw.score)
            if draw.invitations < 0:
                raise NegativeDrawInvitationsError(draw.id, draw.invitations)
            seen.add(draw.id)

    def __iter__(self) -> Iterator[Draw]:
        return iter(self.draws)

    def __len__(self) -> int:
        return len(self.draws)

    def of_type(self, draw_type: DrawType) -> tuple[Draw, ...]:
        return tuple(draw for draw in self.draws if draw.type is draw_type)


def is_eligible_for(
    draw: Draw,
    total_score: int,
    category: OccupationCategory,
    profile: Profile,
) -> bool:
    """Apply the first matching rule for the draw's type."""
    meets_cutoff = total_score >= draw.score
    if draw.type is DrawType.GENERAL:
        return meets_cutoff
    if draw.type is DrawType.FRENCH:
        return meets_cutoff and (
            profile.occupation_category is OccupationCategory.FRENCH
            or profile.language_french.is_strong
        )
    if draw.type.value == category.value:
        return meets_cutoff
    if draw.type is DrawType.CEC:
        return meets_cutoff and profile.years_canadian_experience >= CEC_MIN_CANADIAN_YEARS
    return False


def matching_draws(
    total_score: int,
    category: OccupationCategory,
    profile: Profile,
    draws: Iterable[Draw],
) -> tuple[Draw, ...]:
    """Return the draws the score would have qualified for, in dataset order.

    An empty tuple is a normal outcome.
    """
    return tuple(
        draw for draw in draws if is_eligible_for(draw, total_score, category, profile)
    )
