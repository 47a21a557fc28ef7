"""Tests for CLI wiring and overrides."""

import json
import re
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from crs_estimator import cli
from crs_estimator.cli import CliDependencies
from crs_estimator.config import EstimatorConfig
from tests.fakes import InMemoryFileSystem

runner = CliRunner()
_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE_RE.sub("", text)


@pytest.fixture(autouse=True)
def _default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_from_env(
        cls: type[EstimatorConfig], dotenv_path: str | None = None
    ) -> EstimatorConfig:
        _ = (cls, dotenv_path)
        return EstimatorConfig()

    monkeypatch.setattr(cli.EstimatorConfig, "from_env", classmethod(fake_from_env))


def _build_app(fs: InMemoryFileSystem | None = None) -> typer.Typer:
    shared = CliDependencies(fs=fs or InMemoryFileSystem())

    def build(*, config: EstimatorConfig) -> CliDependencies:
        _ = config
        return shared

    return cli.create_app(build)


def _write_dataset(fs: InMemoryFileSystem, path: Path) -> None:
    payload = {
        "schema_version": 1,
        "draws": [
            {"id": "g1", "date": "2024-06-01", "type": "General", "score": 360, "invitations": 99},
            {"id": "c1", "date": "2024-05-01", "type": "CEC", "score": 300, "invitations": 10},
        ],
    }
    fs.write_text(json.dumps(payload), path)


def test_cli_version_option_prints_package_version(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "__version__", "9.9.9")

    result = runner.invoke(_build_app(), ["--version"])

    assert result.exit_code == 0
    assert "9.9.9" in _strip_ansi(result.output)


def test_score_with_default_options() -> None:
    result = runner.invoke(_build_app(), ["score"])

    assert result.exit_code == 0
    output = _strip_ansi(result.output)
    assert "Estimated CRS score: 372" in output
    assert "Core: 322" in output
    assert "Transferability: 50" in output


def test_score_with_nomination_matches_bundled_draws() -> None:
    result = runner.invoke(_build_app(), ["score", "--nomination"])

    assert result.exit_code == 0
    output = _strip_ansi(result.output)
    assert "Estimated CRS score: 972" in output
    assert "Eligible for" in output


def test_score_with_scenario() -> None:
    result = runner.invoke(_build_app(), ["score", "--scenario", "phd"])

    assert result.exit_code == 0
    output = _strip_ansi(result.output)
    assert "Estimated CRS score: 486" in output
    assert "Eligible for 1 draws" in output
    assert "2023-07-05" in output


def test_score_with_profile_file_and_custom_draws() -> None:
    fs = InMemoryFileSystem()
    profile_path = Path("profiles/me.json")
    draws_path = Path("data/draws.json")
    fs.write_text(
        json.dumps(
            {
                "age": 29,
                "education": "bachelor",
                "language_english": "intermediate",
                "years_foreign_experience": 1,
            }
        ),
        profile_path,
    )
    _write_dataset(fs, draws_path)

    result = runner.invoke(
        _build_app(fs),
        ["score", "--profile-file", str(profile_path), "--draws", str(draws_path)],
    )

    assert result.exit_code == 0
    output = _strip_ansi(result.output)
    assert "Estimated CRS score: 372" in output
    assert "Eligible for 1 draws (lowest cutoff 360)" in output


def test_score_reports_no_matches() -> None:
    fs = InMemoryFileSystem()
    draws_path = Path("data/draws.json")
    _write_dataset(fs, draws_path)

    result = runner.invoke(
        _build_app(fs),
        ["score", "--age", "50", "--foreign-years", "0", "--draws", str(draws_path)],
    )

    assert result.exit_code == 0
    assert "No matching draws found for General" in _strip_ansi(result.output)


def test_score_rejects_unknown_education() -> None:
    result = runner.invoke(_build_app(), ["score", "--education", "diploma"])

    assert result.exit_code != 0
    assert "education" in _strip_ansi(result.output)


def test_score_rejects_negative_age() -> None:
    result = runner.invoke(_build_app(), ["score", "--age", "-1"])

    assert result.exit_code != 0


def test_score_rejects_scenario_with_profile_file() -> None:
    result = runner.invoke(
        _build_app(),
        ["score", "--scenario", "phd", "--profile-file", "profiles/me.json"],
    )

    assert result.exit_code != 0


def test_score_unknown_scenario_fails_cleanly() -> None:
    result = runner.invoke(_build_app(), ["score", "--scenario", "masters"])

    assert result.exit_code == 1
    assert "Unknown scenario" in _strip_ansi(result.output)


def test_score_missing_draws_file_fails_cleanly() -> None:
    result = runner.invoke(_build_app(), ["score", "--draws", "missing.json"])

    assert result.exit_code == 1
    assert "Draw dataset file not found" in _strip_ansi(result.output)


def test_draws_filters_by_type_and_limit() -> None:
    result = runner.invoke(_build_app(), ["draws", "--type", "general", "--limit", "2"])

    assert result.exit_code == 0
    output = _strip_ansi(result.output)
    assert "2024-03-25" in output
    assert "2024-01-31" in output
    assert "2023-12-06" not in output
    assert "Showing 2 of 5 draws" in output


@pytest.mark.parametrize("limit", ["0", "-1"])
def test_draws_rejects_non_positive_limit(limit: str) -> None:
    result = runner.invoke(_build_app(), ["draws", "--type", "general", "--limit", limit])

    assert result.exit_code == 2
    assert "Showing" not in _strip_ansi(result.output)


def test_draws_rejects_unknown_type() -> None:
    result = runner.invoke(_build_app(), ["draws", "--type", "express"])

    assert result.exit_code == 2
    output = _strip_ansi(result.output)
    assert "Unknown draw type" in output
    assert "Invalid profile field" not in output


def test_scenarios_lists_presets() -> None:
    result = runner.invoke(_build_app(), ["scenarios"])

    assert result.exit_code == 0
    output = _strip_ansi(result.output)
    for name in ("phd", "diploma", "bachelor"):
        assert name in output


def test_config_file_overrides_max_draws_shown() -> None:
    fs = InMemoryFileSystem()
    config_path = Path("config/estimator.toml")
    fs.write_text("schema_version = 1\n\n[estimator]\nmax_draws_shown = 1\n", config_path)

    result = runner.invoke(_build_app(fs), ["--config", str(config_path), "draws"])

    assert result.exit_code == 0
    assert "Showing 1 of 43 draws" in _strip_ansi(result.output)


def test_missing_config_file_fails_cleanly() -> None:
    result = runner.invoke(_build_app(), ["--config", "missing.toml", "draws"])

    assert result.exit_code == 1
    assert "Config file not found" in _strip_ansi(result.output)
