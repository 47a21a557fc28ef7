"""CLI for the CRS estimator.

Commands:
- score: Estimate a CRS score and list the historical draws it would have met
- draws: Show the historical draw table
- scenarios: Show the preset profiles and their estimated scores
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.table import Table

from . import __version__
from .application.draw_catalog import resolve_draw_dataset
from .application.estimate import EstimateResult, run_estimate
from .application.profiles import load_profile
from .config import EstimatorConfig
from .config_file import load_estimator_config_file
from .domain.eligibility import Draw, DrawDataset, DrawType
from .domain.profile import EducationLevel, LanguageLevel, OccupationCategory, Profile
from .domain.scenarios import SCENARIOS, get_scenario
from .domain.scoring import calculate_score
from .exceptions import CrsEstimatorError, InvalidProfileError
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: EstimatorConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: EstimatorConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: EstimatorConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the crs-estimate entry point.")


class ProfileOptionError(typer.BadParameter):
    """Raised when profile options do not form a valid profile."""

    def __init__(self, exc: InvalidProfileError) -> None:
        super().__init__(str(exc))


class ConflictingProfileSourceError(typer.BadParameter):
    """Raised when both --scenario and --profile-file are supplied."""

    def __init__(self) -> None:
        super().__init__("Use either --scenario or --profile-file, not both.")


class DrawTypeOptionError(typer.BadParameter):
    """Raised when --type does not name a known draw type."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown draw type '{value}'. Expected one of: "
            f"{', '.join(member.value for member in DrawType)}."
        )


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"crs-estimate {__version__}")
        raise typer.Exit()


def _fail(exc: CrsEstimatorError) -> typer.Exit:
    rprint(f"[red]✗ {exc}[/red]")
    return typer.Exit(code=1)


def _profile_from_options(
    *,
    age: int,
    education: str,
    english: str,
    french: str,
    canadian_years: int,
    foreign_years: int,
    certificate: bool,
    nomination: bool,
    sibling: bool,
    category: OccupationCategory,
) -> Profile:
    try:
        return Profile(
            age=age,
            education=EducationLevel.parse(education, field_name="education"),
            language_english=LanguageLevel.parse(english, field_name="language_english"),
            language_french=LanguageLevel.parse(french, field_name="language_french"),
            years_canadian_experience=canadian_years,
            years_foreign_experience=foreign_years,
            has_certificate_of_qualification=certificate,
            has_provincial_nomination=nomination,
            has_sibling_in_canada=sibling,
            occupation_category=category,
        )
    except InvalidProfileError as exc:
        raise ProfileOptionError(exc) from exc


def _draws_table(title: str, draws: tuple[Draw, ...] | DrawDataset) -> Table:
    table = Table(title=title)
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("CRS", justify="right")
    table.add_column("Invitations", justify="right")
    for draw in draws:
        table.add_row(draw.date, draw.type.value, str(draw.score), f"{draw.invitations:,}")
    return table


def _print_estimate(result: EstimateResult, *, limit: int) -> None:
    breakdown = result.score.breakdown
    rprint(f"[bold]Estimated CRS score: {result.score.total}[/bold]")
    rprint(
        f"  Core: {breakdown.core}  Transferability: {breakdown.transferability}  "
        f"Additional: {breakdown.additional}"
    )
    rprint(
        f"  Age: {breakdown.age}  Education: {breakdown.education}  "
        f"Language: {breakdown.language}  Canadian work: {breakdown.canadian_work}"
    )
    if not result.is_eligible:
        rprint(f"[yellow]No matching draws found for {result.category.value}[/yellow]")
        return
    rprint(
        f"[green]✓ Eligible for {len(result.eligible_draws)} draws "
        f"(lowest cutoff {result.lowest_cutoff})[/green]"
    )
    rprint(_draws_table("Eligible draws", result.eligible_draws[:limit]))


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Express Entry CRS estimator: score a profile → match historical draws",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file overriding environment settings",
            ),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = EstimatorConfig.from_env()
        if config_path is not None:
            fs = deps_builder(config=config).fs
            try:
                config = config.with_file_overrides(
                    load_estimator_config_file(path=config_path, fs=fs)
                )
            except CrsEstimatorError as exc:
                raise _fail(exc) from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def score(
        ctx: typer.Context,
        age: Annotated[int, typer.Option("--age", help="Age in years")] = 29,
        education: Annotated[
            str,
            typer.Option(
                "--education",
                "-e",
                help="none, secondary, one-year, two-year, bachelor, two-or-more, master, "
                "doctorate",
            ),
        ] = "bachelor",
        english: Annotated[
            str,
            typer.Option("--english", help="none, beginner, intermediate, advanced"),
        ] = "intermediate",
        french: Annotated[
            str,
            typer.Option("--french", help="none, beginner, intermediate, advanced"),
        ] = "none",
        canadian_years: Annotated[
            int,
            typer.Option("--canadian-years", help="Years of Canadian work experience"),
        ] = 0,
        foreign_years: Annotated[
            int,
            typer.Option("--foreign-years", help="Years of foreign work experience"),
        ] = 1,
        certificate: Annotated[
            bool,
            typer.Option("--certificate", help="Holds a certificate of qualification"),
        ] = False,
        nomination: Annotated[
            bool,
            typer.Option("--nomination", help="Holds a provincial nomination (+600)"),
        ] = False,
        sibling: Annotated[
            bool,
            typer.Option("--sibling", help="Has a sibling living in Canada (+15)"),
        ] = False,
        category: Annotated[
            str | None,
            typer.Option(
                "--category",
                help="Occupation category (General, French, STEM, Healthcare, Trades, "
                "Transport, Agriculture)",
            ),
        ] = None,
        profile_file: Annotated[
            Path | None,
            typer.Option("--profile-file", "-f", help="JSON profile file"),
        ] = None,
        scenario: Annotated[
            str | None,
            typer.Option("--scenario", "-s", help="Preset profile (phd, diploma, bachelor)"),
        ] = None,
        draws_path: Annotated[
            Path | None,
            typer.Option("--draws", help="JSON draw dataset (default: bundled history)"),
        ] = None,
    ) -> None:
        """Estimate a CRS score and list the historical draws it would have met."""
        state = _get_context(ctx)
        config = state.config
        if draws_path is not None:
            config = config.with_overrides(draws_path=str(draws_path))
        if scenario is not None and profile_file is not None:
            raise ConflictingProfileSourceError()

        try:
            chosen_category = (
                None
                if category is None
                else OccupationCategory.parse(category, field_name="occupation_category")
            )
        except InvalidProfileError as exc:
            raise ProfileOptionError(exc) from exc

        deps = state.build_dependencies(config=config)
        try:
            if scenario is not None:
                profile = get_scenario(scenario)
            elif profile_file is not None:
                profile = load_profile(path=profile_file, fs=deps.fs)
            else:
                profile = _profile_from_options(
                    age=age,
                    education=education,
                    english=english,
                    french=french,
                    canadian_years=canadian_years,
                    foreign_years=foreign_years,
                    certificate=certificate,
                    nomination=nomination,
                    sibling=sibling,
                    category=chosen_category or config.default_category,
                )
            dataset = resolve_draw_dataset(draws_path=config.draws_path, fs=deps.fs)
        except CrsEstimatorError as exc:
            raise _fail(exc) from exc

        result = run_estimate(profile=profile, dataset=dataset, category=chosen_category)
        _print_estimate(result, limit=config.max_draws_shown)

    @app.command()
    def draws(
        ctx: typer.Context,
        draw_type: Annotated[
            str | None,
            typer.Option("--type", "-t", help="Only show draws of this type (e.g. CEC)"),
        ] = None,
        limit: Annotated[
            int | None,
            typer.Option("--limit", "-n", min=1, help="Maximum number of draws to show"),
        ] = None,
        draws_path: Annotated[
            Path | None,
            typer.Option("--draws", help="JSON draw dataset (default: bundled history)"),
        ] = None,
    ) -> None:
        """Show historical Express Entry draws, most recent first."""
        state = _get_context(ctx)
        selected_type = None
        if draw_type is not None:
            selected_type = DrawType.from_label(draw_type)
            if selected_type is None:
                raise DrawTypeOptionError(draw_type)
        config = state.config.with_overrides(
            draws_path=None if draws_path is None else str(draws_path),
            max_draws_shown=limit,
        )
        deps = state.build_dependencies(config=config)
        try:
            dataset = resolve_draw_dataset(draws_path=config.draws_path, fs=deps.fs)
            selected = dataset.draws if selected_type is None else dataset.of_type(selected_type)
        except CrsEstimatorError as exc:
            raise _fail(exc) from exc

        rprint(_draws_table("Historical Express Entry draws", selected[: config.max_draws_shown]))
        rprint(f"  Showing {min(len(selected), config.max_draws_shown)} of {len(selected)} draws")

    @app.command()
    def scenarios() -> None:
        """Show the preset profiles and their estimated scores."""
        table = Table(title="Preset scenarios")
        table.add_column("Name")
        table.add_column("Age", justify="right")
        table.add_column("Education")
        table.add_column("English")
        table.add_column("French")
        table.add_column("Category")
        table.add_column("CRS", justify="right")
        for name, profile in SCENARIOS.items():
            table.add_row(
                name,
                str(profile.age),
                profile.education.value,
                profile.language_english.value,
                profile.language_french.value,
                profile.occupation_category.value,
                str(calculate_score(profile).total),
            )
        rprint(table)

    _ = (main, score, draws, scenarios)

    return app
