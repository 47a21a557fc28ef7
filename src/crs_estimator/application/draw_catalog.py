"""Loading and strict validation for invitation-round datasets."""

from __future__ import annotations

import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from ..domain.draw_history import HISTORICAL_DRAWS
from ..domain.eligibility import Draw, DrawDataset, DrawType
from ..exceptions import DrawDatasetFileNotFoundError, DrawDatasetValidationError
from ..observability.logging import get_logger
from ..protocols import FileSystem

_SCHEMA_VERSION = 1

logger = get_logger("crs_estimator.draw_catalog")


class _DrawModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    date: datetime.date
    type: str
    score: int
    invitations: int

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str) -> str:
        draw_type = DrawType.from_label(value)
        if draw_type is None:
            raise ValueError
        return draw_type.value

    @field_validator("score", "invitations")
    @classmethod
    def _validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError
        return value


class _DrawDatasetModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    draws: tuple[_DrawModel, ...]

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> _DrawDatasetModel:
        ids = [draw.id for draw in self.draws]
        if len(set(ids)) != len(ids):
            raise ValueError
        return self


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _to_domain_draw(model: _DrawModel) -> Draw:
    return Draw(
        id=model.id,
        date=model.date.isoformat(),
        type=DrawType(model.type),
        score=model.score,
        invitations=model.invitations,
    )


def load_draw_dataset(*, path: Path, fs: FileSystem) -> DrawDataset:
    """Load and validate a draw dataset from JSON, keeping file order."""
    if not fs.exists(path):
        raise DrawDatasetFileNotFoundError(str(path))

    payload = fs.read_text(path)
    try:
        model = _DrawDatasetModel.model_validate_json(payload)
    except ValidationError as exc:
        raise DrawDatasetValidationError(str(path), _format_validation_error(exc)) from exc

    dataset = DrawDataset(draws=tuple(_to_domain_draw(draw) for draw in model.draws))
    logger.info("Loaded %s draws from %s", len(dataset), path)
    return dataset


def resolve_draw_dataset(*, draws_path: str, fs: FileSystem) -> DrawDataset:
    """Return the dataset at ``draws_path``, or the bundled history when it is empty."""
    if not draws_path.strip():
        return HISTORICAL_DRAWS
    return load_draw_dataset(path=Path(draws_path.strip()), fs=fs)
