"""
Command-line interface for the capacity planner.

Provides commands for availability analysis, holiday and hackathon lookups,
vacation apportionment, date-gap validation and milestone planning.
"""

import sys

import click
import structlog

from capacity_planner.config import get_defaults, load_config, validate_config
from capacity_planner.config.defaults import CATEGORIES
from capacity_planner.core import (
    AvailabilityAnalyzer,
    DateHistoryRecorder,
    apportion_leave,
    holidays_in_range,
    plan_milestones,
    release_ga_dates,
    validate_date_gaps,
)
from capacity_planner.reporting import (
    analysis_to_json,
    format_availability_analysis,
    format_date_gap_validation,
    format_defaults,
    format_event_days,
    format_holidays,
    format_vacation_days,
)
from capacity_planner.streaming import TopicResolver, create_publisher
from capacity_planner.utils.calendar import event_days_for_period
from capacity_planner.utils.logging import configure_logging
from capacity_planner.utils.time_conversion import to_date

logger = structlog.get_logger()

DATE = click.DateTime(formats=["%Y-%m-%d"])


def _parse_pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    pairs = {}
    for value in values:
        name, sep, raw = value.partition("=")
        if not sep or not name or not raw:
            raise click.BadParameter(f"expected NAME=VALUE, got '{value}'", param_hint=option)
        pairs[name.strip()] = raw.strip()
    return pairs


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Output logs as JSON",
)
@click.pass_context
def main(ctx, config, verbose, json_logs):
    """Release capacity planner."""
    ctx.ensure_object(dict)

    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(level=log_level, json_output=json_logs)

    ctx.obj["config_path"] = config
    ctx.obj["log_level"] = log_level


@main.command()
@click.argument("execute_commit", type=DATE)
@click.argument("soft_code_complete", type=DATE)
@click.argument("ga", type=DATE)
@click.option("--region", "-r", default=None, help="Holiday region (default: from config)")
@click.option("--json", "as_json", is_flag=True, help="Print the analysis as JSON")
@click.option(
    "--snapshot",
    "release_plan_id",
    default=None,
    help="Publish the result as a baseline for this release plan id",
)
@click.pass_context
def analyze(ctx, execute_commit, soft_code_complete, ga, region, as_json, release_plan_id):
    """Analyze engineering availability between milestones.

    Examples:

    \b
    capacity-planner analyze 2024-01-02 2024-02-01 2024-03-01
    capacity-planner analyze 2024-01-02 2024-02-01 2024-03-01 --region IN --json
    """
    try:
        config = load_config(ctx.obj.get("config_path"))
        analyzer = AvailabilityAnalyzer(
            region=region or config.holidays.region,
            policy=config.leave,
            thresholds=config.insights,
        )
        analysis = analyzer.analyze(execute_commit, soft_code_complete, ga)

        if release_plan_id:
            recorder = DateHistoryRecorder(
                create_publisher(config.audit),
                TopicResolver(config.audit),
            )
            try:
                recorder.record_analysis_snapshot(release_plan_id, analysis)
            finally:
                recorder.close()

        if as_json:
            click.echo(analysis_to_json(analysis))
        else:
            click.echo(format_availability_analysis(analysis))

    except Exception as e:
        logger.exception("analyze_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("start", type=DATE)
@click.argument("end", type=DATE)
@click.option("--region", "-r", default=None, help="Holiday region (default: from config)")
@click.pass_context
def holidays(ctx, start, end, region):
    """List holidays between START and END (inclusive)."""
    try:
        config = load_config(ctx.obj.get("config_path"))
        start, end = to_date(start), to_date(end)
        entries = holidays_in_range(start, end, region or config.holidays.region)
        click.echo(format_holidays(entries, start, end))
    except Exception as e:
        logger.exception("holidays_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("start", type=DATE)
@click.argument("end", type=DATE)
def hackathon(start, end):
    """List hackathon days between START and END (inclusive)."""
    start, end = to_date(start), to_date(end)
    click.echo(format_event_days(event_days_for_period(start, end), start, end))


@main.command()
@click.argument("start", type=DATE)
@click.argument("end", type=DATE)
@click.argument("total_start", type=DATE)
@click.argument("total_end", type=DATE)
@click.pass_context
def vacation(ctx, start, end, total_start, total_end):
    """Apportion vacation to START..END within TOTAL_START..TOTAL_END."""
    try:
        config = load_config(ctx.obj.get("config_path"))
        days = apportion_leave(start, end, total_start, total_end, config.leave)
        click.echo(format_vacation_days(days, to_date(start), to_date(end), config.leave))
    except Exception as e:
        logger.exception("vacation_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option(
    "--category",
    type=click.Choice(CATEGORIES),
    default="all",
    show_default=True,
    help="Defaults category to show",
)
@click.pass_context
def defaults(ctx, category):
    """Show default planning values."""
    try:
        config = load_config(ctx.obj.get("config_path"))
        click.echo(format_defaults(get_defaults(category, config), category))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("validate-gaps")
@click.option(
    "--date", "-d",
    "dates",
    multiple=True,
    required=True,
    help="Milestone date as NAME=YYYY-MM-DD (e.g. ga=2024-06-04)",
)
@click.option(
    "--gap", "-g",
    "gaps",
    multiple=True,
    help="Override an expected gap as NAME=WEEKS (e.g. ga_to_promotion_gate=3)",
)
@click.option("--strict", is_flag=True, help="Exit with status 1 when warnings are found")
@click.pass_context
def validate_gaps_cmd(ctx, dates, gaps, strict):
    """Check milestone spacing against the expected date gaps."""
    try:
        config = load_config(ctx.obj.get("config_path"))
        actual = _parse_pairs(dates, "--date")
        expected = config.date_gaps.model_dump()
        expected.update({k: int(v) for k, v in _parse_pairs(gaps, "--gap").items()})

        result = validate_date_gaps(actual, expected)
        click.echo(format_date_gap_validation(result))

    except click.BadParameter:
        raise
    except Exception as e:
        logger.exception("validate_gaps_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if strict and not result.is_valid:
        sys.exit(1)


@main.command()
@click.argument("ga", type=DATE)
@click.pass_context
def plan(ctx, ga):
    """Propose earlier milestone dates working back from GA."""
    try:
        config = load_config(ctx.obj.get("config_path"))
        planned = plan_milestones(to_date(ga), config.date_gaps)

        click.echo("Planned milestones:")
        for name, value in planned.as_dict().items():
            click.echo(f"  {name}: {value.isoformat()}")

    except Exception as e:
        logger.exception("plan_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("year", type=int)
@click.pass_context
def releases(ctx, year):
    """List GA target dates for YEAR's release cadence."""
    try:
        config = load_config(ctx.obj.get("config_path"))
        for ga in release_ga_dates(year, config.release):
            click.echo(ga.isoformat())
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("validate-config")
@click.pass_context
def validate_config_cmd(ctx):
    """Validate the configuration file."""
    from capacity_planner.config.validation import ConfigurationError

    config_path = ctx.obj.get("config_path")

    try:
        config = load_config(config_path)
        warnings = validate_config(config)

        click.echo("Configuration is valid.")

        if warnings:
            click.echo("\nWarnings:")
            for warning in warnings:
                click.echo(f"  - {warning}")

    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
