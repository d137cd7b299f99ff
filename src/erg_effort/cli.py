"""
Command-line interface for the erg-effort package.

This module provides a command-line interface for scoring rowing workouts,
analyzing their heart rate data and processing whole workout logs.
"""

import json
import logging
from pathlib import Path

import click

from .exceptions import ErgEffortError
from .formatting import format_distance, format_split, format_time
from .metrics import HeartRateZoneCalculator, split_seconds
from .models import HRAResult, WorkoutAnalysis, WorkoutRecord
from .services import AnalysisService
from .settings import load_settings


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


config_option = click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
profile_option = click.option(
    "--profile",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to athlete profile (JSON or YAML)",
)


@click.group()
def main():
    """
    Score rowing workouts and analyze heart rate data.

    This tool computes the 0-100 Effort Points score of a workout together
    with a heart rate analysis covering intensity, zones, efficiency, cardiac
    drift and trend.
    """


@main.command()
@click.argument(
    "workout_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@profile_option
@config_option
@click.option("--json", "as_json", is_flag=True, help="Print the analysis as JSON")
def analyze(
    workout_file: Path, profile: Path | None, config: Path | None, as_json: bool
) -> None:
    """
    Analyze a single workout in detail.

    Prints the effort score breakdown and the heart rate analysis.
    """
    configure_logging()
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        service = AnalysisService(settings)

        athlete = service.loader.load_profile(profile)
        workout = service.loader.load_workout(workout_file)
        analysis = service.analyze(athlete, workout)

    except ErgEffortError as e:
        logger.error(f"Analysis failed: {str(e)}")
        raise click.Abort() from e

    if as_json:
        click.echo(json.dumps(analysis.model_dump(mode="json"), indent=2))
        return

    _echo_analysis(workout, analysis)


@main.command()
@click.argument(
    "workouts_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@profile_option
@config_option
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)
def batch(
    workouts_csv: Path, profile: Path | None, config: Path | None, verbose: bool
) -> None:
    """
    Score every workout of a workout log.

    Writes the enriched workouts CSV and the daily effort summary CSV to the
    configured output directory.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        service = AnalysisService(settings)

        athlete = service.loader.load_profile(profile)
        result = service.process_file(athlete, workouts_csv)

    except ErgEffortError as e:
        logger.error(f"Processing failed: {str(e)}")
        raise click.Abort() from e

    logger.info(f"Successfully scored {len(result.enriched_df)} workouts")
    if result.skipped:
        logger.warning(f"Skipped {result.skipped} invalid workouts")

    click.echo(f"Workouts scored: {len(result.enriched_df)}")
    click.echo(f"Days summarized: {len(result.daily_df)}")
    click.echo(f"Enriched workouts: {settings.enriched_file}")
    click.echo(f"Daily summary: {settings.daily_summary_file}")


@main.command()
@profile_option
@config_option
def zones(profile: Path | None, config: Path | None) -> None:
    """Print the athlete's heart rate zones."""
    configure_logging()
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        service = AnalysisService(settings)
        athlete = service.loader.load_profile(profile)

    except ErgEffortError as e:
        logger.error(f"Zone calculation failed: {str(e)}")
        raise click.Abort() from e

    calculator = HeartRateZoneCalculator(athlete.max_hr, athlete.resting_hr)

    click.echo(
        f"\nHeart Rate Zones (max {athlete.max_hr:.0f}, "
        f"resting {athlete.resting_hr:.0f})"
    )
    click.echo("=" * 40)
    for zone in calculator.zones():
        click.echo(
            f"Zone {zone.zone} {zone.name:<10} {zone.min_hr}-{zone.max_hr} bpm"
            f"  {zone.training_effect}"
        )


@main.command()
@click.argument(
    "workout_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@profile_option
def share(workout_file: Path, profile: Path | None) -> None:
    """Print the share message of a workout."""
    configure_logging()
    logger = logging.getLogger(__name__)

    try:
        service = AnalysisService(load_settings(None))
        athlete = service.loader.load_profile(profile)
        workout = service.loader.load_workout(workout_file)

    except ErgEffortError as e:
        logger.error(f"Share failed: {str(e)}")
        raise click.Abort() from e

    click.echo(service.share_text(athlete, workout))


def _echo_analysis(workout: WorkoutRecord, analysis: WorkoutAnalysis) -> None:
    effort = analysis.effort

    click.echo("\nWorkout Analysis Results:")
    click.echo("-" * 40)
    click.echo(f"Distance: {format_distance(workout.total_distance_metres)}")
    click.echo(f"Time: {format_time(workout.total_time_seconds)}")
    split = split_seconds(workout.total_distance_metres, workout.total_time_seconds)
    click.echo(f"Split: {format_split(split)}")

    click.echo(f"\nEffort: {effort.effort_points:.1f} EP ({effort.zone_label})")
    click.echo(effort.description)
    click.echo(f"Cardiac Load: {effort.breakdown.cardiac_load:.1f} / 40")
    click.echo(f"Work Output: {effort.breakdown.work_output:.1f} / 35")
    click.echo(f"Pacing: {effort.breakdown.pacing:.1f} / 15")
    click.echo(f"Economy: {effort.breakdown.economy:.1f} / 10")

    _echo_heart_rate(analysis.heart_rate)


def _echo_heart_rate(hra: HRAResult) -> None:
    click.echo("\nHeart Rate Analysis:")
    if not hra.available:
        click.echo(hra.reason)
        return

    if hra.intensity:
        click.echo(
            f"Intensity: {hra.intensity.bpm:.0f} bpm, "
            f"{hra.intensity.percent_max:.1f}% of max, "
            f"{hra.intensity.percent_hrr:.1f}% of HRR"
        )
    if hra.zone:
        click.echo(
            f"Zone {hra.zone.zone} ({hra.zone.name}): {hra.zone.training_effect}"
        )
    if hra.efficiency:
        click.echo(
            f"Efficiency: {hra.efficiency.watts_per_beat:.2f} W/beat "
            f"({hra.efficiency.rating.value})"
        )
    if hra.drift:
        click.echo(
            f"Cardiac Drift: {hra.drift.percent:.1f}% ({hra.drift.rating.value})"
            f" - {hra.drift.insight}"
        )
    if hra.trend:
        click.echo(f"Trend: {hra.trend.pattern.value} - {hra.trend.insight}")
    if hra.zone_distribution:
        click.echo("\nTime in Zone:")
        for zone_number, zone_time in sorted(hra.zone_distribution.items()):
            click.echo(
                f"Zone {zone_number} {zone_time.name:<10} "
                f"{format_time(zone_time.seconds)} ({zone_time.percent:.1f}%)"
            )


if __name__ == "__main__":
    main()
