"""Typed parsing and validation for estimator config files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .domain.profile import OccupationCategory
from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class EstimatorConfigFile:
    """Validated estimator config values loaded from a TOML file."""

    draws_path: str | None = None
    default_category: OccupationCategory | None = None
    max_draws_shown: int | None = None


class _EstimatorSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    draws_path: str | None = None
    default_category: str | None = None
    max_draws_shown: int | None = None

    @field_validator("draws_path")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("default_category")
    @classmethod
    def _validate_category(cls, value: str | None) -> str | None:
        if value is None:
            return None
        category = OccupationCategory.from_label(value)
        if category is None:
            raise ValueError
        return category.value

    @field_validator("max_draws_shown")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    estimator: _EstimatorSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_estimator_config_file(*, path: Path, fs: FileSystem) -> EstimatorConfigFile:
    """Load and validate an estimator TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.estimator
    return EstimatorConfigFile(
        draws_path=section.draws_path,
        default_category=None
        if section.default_category is None
        else OccupationCategory(section.default_category),
        max_draws_shown=section.max_draws_shown,
    )
