"""Estimate application service: score a profile and match it against draws.

Usage example:
    from crs_estimator.application.estimate import run_estimate
    from crs_estimator.domain.draw_history import HISTORICAL_DRAWS
    from crs_estimator.domain.scenarios import get_scenario

    result = run_estimate(profile=get_scenario("phd"), dataset=HISTORICAL_DRAWS)
    print(result.score.total, len(result.eligible_draws))
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.eligibility import Draw, DrawDataset, matching_draws
from ..domain.profile import OccupationCategory, Profile
from ..domain.scoring import ScoreResult, calculate_score
from ..observability.logging import get_logger

logger = get_logger("crs_estimator.estimate")


@dataclass(frozen=True)
class EstimateResult:
    """Score and eligible draws for one profile evaluation."""

    profile: Profile
    category: OccupationCategory
    score: ScoreResult
    eligible_draws: tuple[Draw, ...]

    @property
    def is_eligible(self) -> bool:
        return bool(self.eligible_draws)

    @property
    def lowest_cutoff(self) -> int | None:
        """Lowest cutoff among eligible draws, or None when nothing matched."""
        if not self.eligible_draws:
            return None
        return min(draw.score for draw in self.eligible_draws)


def run_estimate(
    *,
    profile: Profile,
    dataset: DrawDataset,
    category: OccupationCategory | None = None,
) -> EstimateResult:
    """Score a profile and match it against a draw dataset.

    Args:
        profile: Applicant profile.
        dataset: Draws to match against, most recent first.
        category: Occupation category to match; defaults to the profile's own.

    Returns:
        EstimateResult with the score and the eligible draws in dataset order.
    """
    target = category or profile.occupation_category
    score = calculate_score(profile)
    eligible = matching_draws(score.total, target, profile, dataset)

    logger.info(
        "Estimated CRS %s (core=%s, transferability=%s, additional=%s); "
        "%s of %s draws matched for %s",
        score.total,
        score.breakdown.core,
        score.breakdown.transferability,
        score.breakdown.additional,
        len(eligible),
        len(dataset),
        target.value,
    )
    for draw in eligible:
        logger.debug("Matched draw %s (%s, cutoff %s)", draw.id, draw.type.value, draw.score)

    return EstimateResult(
        profile=profile,
        category=target,
        score=score,
        eligible_draws=eligible,
    )
