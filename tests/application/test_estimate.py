"""Tests for the estimate application service."""

from __future__ import annotations

import logging

import pytest

from crs_estimator.application.estimate import run_estimate
from crs_estimator.domain.eligibility import Draw, DrawDataset, DrawType
from crs_estimator.domain.profile import LanguageLevel, OccupationCategory
from tests.support.profiles import make_profile


def _dataset() -> DrawDataset:
    return DrawDataset(
        draws=(
            Draw(id="g-400", date="2024-03-01", type=DrawType.GENERAL, score=400, invitations=1),
            Draw(id="f-360", date="2024-02-01", type=DrawType.FRENCH, score=360, invitations=2),
            Draw(id="s-350", date="2024-01-01", type=DrawType.STEM, score=350, invitations=3),
            Draw(id="g-370", date="2023-12-01", type=DrawType.GENERAL, score=370, invitations=4),
        )
    )


def test_run_estimate_uses_profile_category_by_default() -> None:
    profile = make_profile(occupation_category=OccupationCategory.STEM)

    result = run_estimate(profile=profile, dataset=_dataset())

    assert result.score.total == 372
    assert result.category is OccupationCategory.STEM
    assert [draw.id for draw in result.eligible_draws] == ["s-350", "g-370"]
    assert result.is_eligible
    assert result.lowest_cutoff == 350


def test_run_estimate_category_override() -> None:
    profile = make_profile(occupation_category=OccupationCategory.STEM)

    result = run_estimate(
        profile=profile,
        dataset=_dataset(),
        category=OccupationCategory.HEALTHCARE,
    )

    assert [draw.id for draw in result.eligible_draws] == ["g-370"]


def test_run_estimate_french_profile() -> None:
    profile = make_profile(
        language_french=LanguageLevel.INTERMEDIATE,
        occupation_category=OccupationCategory.FRENCH,
    )

    result = run_estimate(profile=profile, dataset=_dataset())

    # 372 + 12 second-language points + 50 French bonus
    assert result.score.total == 434
    assert [draw.id for draw in result.eligible_draws] == ["g-400", "f-360", "g-370"]


def test_run_estimate_without_matches() -> None:
    profile = make_profile(age=50, years_foreign_experience=0)

    result = run_estimate(profile=profile, dataset=_dataset())

    assert result.eligible_draws == ()
    assert not result.is_eligible
    assert result.lowest_cutoff is None


def test_run_estimate_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("crs_estimator.estimate")
    logger.addHandler(caplog.handler)
    try:
        run_estimate(profile=make_profile(), dataset=_dataset())
    finally:
        logger.removeHandler(caplog.handler)

    assert "Estimated CRS 372" in caplog.text
    assert "1 of 4 draws matched for General" in caplog.text
