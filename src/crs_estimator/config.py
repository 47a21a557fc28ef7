"""Centralised, injectable configuration for the CRS estimator."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import EstimatorConfigFile
from .domain.profile import OccupationCategory


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class CategoryEnvVarError(ValueError):
    """Raised when an environment variable must name an occupation category."""

    def __init__(self, env_name: str) -> None:
        choices = ", ".join(category.value for category in OccupationCategory)
        super().__init__(f"{env_name} must be one of: {choices}.")


@dataclass(frozen=True)
class EstimatorConfig:
    """Immutable configuration for the estimator collaborators.

    Load from environment with `EstimatorConfig.from_env()` or construct directly for testing.
    """

    # Empty means the bundled 2023-2025 history
    draws_path: str = ""
    default_category: OccupationCategory = OccupationCategory.GENERAL
    max_draws_shown: int = 10

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            EstimatorConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            draws_path=os.getenv("CRS_DRAWS_PATH", "").strip(),
            default_category=_parse_category(
                os.getenv("CRS_DEFAULT_CATEGORY", ""),
                env_name="CRS_DEFAULT_CATEGORY",
            )
            or OccupationCategory.GENERAL,
            max_draws_shown=_parse_optional_positive_int(
                os.getenv("CRS_MAX_DRAWS_SHOWN", ""),
                env_name="CRS_MAX_DRAWS_SHOWN",
            )
            or 10,
        )

    def with_overrides(
        self,
        *,
        draws_path: str | None = None,
        default_category: OccupationCategory | None = None,
        max_draws_shown: int | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            draws_path=self.draws_path if draws_path is None else draws_path.strip(),
            default_category=self.default_category
            if default_category is None
            else default_category,
            max_draws_shown=self.max_draws_shown
            if max_draws_shown is None
            else max_draws_shown,
        )

    def with_file_overrides(self, file_config: EstimatorConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return self.with_overrides(
            draws_path=file_config.draws_path,
            default_category=file_config.default_category,
            max_draws_shown=file_config.max_draws_shown,
        )


def _parse_category(value: str, *, env_name: str) -> OccupationCategory | None:
    """Parse an optional occupation category from an environment variable."""
    text = value.strip()
    if not text:
        return None
    category = OccupationCategory.from_label(text)
    if category is None:
        raise CategoryEnvVarError(env_name)
    return category


def _parse_optional_positive_int(value: str, *, env_name: str) -> int | None:
    """Parse an optional positive integer from an environment variable."""
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed
