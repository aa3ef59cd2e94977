"""Command-line interface for fishing-advisor."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import AdvisorConfig
from ..core.location import Place, resolve_by_name


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _place_from_options(config: AdvisorConfig, city: str | None, lat: float | None,
                        lon: float | None, locate: bool) -> Place:
    """Determine the place (priority: lat/lon > --city > --locate > default)."""
    if (lat is None) != (lon is None):
        raise click.UsageError("--lat and --lon must be given together.")

    if lat is not None:
        try:
            return Place(name=city or "Custom", query=city, latitude=lat, longitude=lon)
        except ValueError as e:
            raise click.BadParameter(str(e)) from e

    if city is not None:
        try:
            return resolve_by_name(city)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--city") from e

    if locate:
        from ..weather.geolocation import locate_place

        return locate_place(config)

    return Place.default(config)


@click.group()
@click.option(
    '--city', '-c',
    type=str,
    default=None,
    help='City name (e.g. "北京", "保定", "London"). Known Chinese city names are mapped automatically.'
)
@click.option(
    '--lat',
    type=float,
    help='Latitude of target location'
)
@click.option(
    '--lon',
    type=float,
    help='Longitude of target location'
)
@click.option(
    '--locate',
    is_flag=True,
    help='Look up your approximate position (falls back to the default city)'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Show progress logging'
)
@click.version_option(package_name="fishing-advisor")
@click.pass_context
def cli(
    ctx: click.Context,
    city: str | None,
    lat: float | None,
    lon: float | None,
    locate: bool,
    verbose: bool
) -> None:
    """Fishing weather advisor and salary ticker.

    Scores current weather for fishing, plans bite windows around
    sunrise and sunset, and rates the next few days.

    Examples:

        fishing-advisor advise

        fishing-advisor --city 保定 advise

        fishing-advisor --lat 39.9 --lon 116.4 forecast --days 3

        fishing-advisor ticker --salary 12000
    """
    ctx.ensure_object(dict)
    _configure_logging(verbose)

    try:
        ctx.obj['config'] = AdvisorConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    ctx.obj['place_options'] = (city, lat, lon, locate)


def _resolve_place(ctx: click.Context) -> Place:
    config = ctx.obj['config']
    return _place_from_options(config, *ctx.obj['place_options'])


@cli.command()
@click.option(
    '--json', '-j', 'output_json',
    is_flag=True,
    help='Output as JSON for automation'
)
@click.pass_context
def advise(ctx: click.Context, output_json: bool) -> None:
    """Show the fishing index, bite windows and outlook.

    Fetches current weather and the forecast for the selected place.
    """
    from ..monitor.advisor import FishingAdvisor

    place = _resolve_place(ctx)
    advisor = FishingAdvisor(config=ctx.obj['config'])

    if output_json:
        advisor.refresh(place)
        click.echo(advisor.to_json())
    else:
        advisor.run(place)

    if advisor.last_error is not None:
        ctx.exit(1)


@cli.command()
@click.option(
    '--days',
    type=click.IntRange(1, 5),
    default=None,
    help='Number of days to rate (default: 5)'
)
@click.option(
    '--json', '-j', 'output_json',
    is_flag=True,
    help='Output as JSON for automation'
)
@click.option(
    '--plain',
    is_flag=True,
    help='Plain text table instead of rich output'
)
@click.pass_context
def forecast(ctx: click.Context, days: int | None, output_json: bool, plain: bool) -> None:
    """Rate the next few days for fishing."""
    import json

    from ..monitor.advisor import FishingAdvisor

    config = ctx.obj['config']
    if days is not None:
        config.forecast_days = days

    place = _resolve_place(ctx)
    advisor = FishingAdvisor(config=config)
    snapshot = advisor.refresh(place)

    if snapshot is None:
        click.echo(f"Error: {advisor.last_error}", err=True)
        ctx.exit(1)

    if output_json:
        click.echo(json.dumps(advisor.to_dict()["forecast"], indent=2, ensure_ascii=False))
    elif plain:
        click.echo(f"Fishing outlook for {place.name}")
        click.echo("=" * 40)
        click.echo(advisor.forecast_frame().to_string(index=False))
    else:
        Console().print(advisor.create_forecast_table(snapshot))


@cli.command()
@click.option(
    '--salary', '-s',
    type=float,
    required=True,
    help='Monthly salary in yuan'
)
def ticker(salary: float) -> None:
    """Show salary earned since start, updated every second.

    Celebrates every 100 yuan. Press Ctrl+C to stop.
    """
    from ..monitor.ticker import SalaryTicker, format_currency

    try:
        salary_ticker = SalaryTicker(monthly_salary=salary)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--salary") from e

    try:
        salary_ticker.run()
    except KeyboardInterrupt:
        click.echo(f"\nStopped. Total earned: {format_currency(salary_ticker.session.earned)}")


@cli.command()
def cities() -> None:
    """List city names that are mapped automatically.

    Any other name is passed to the weather provider as typed.
    """
    from ..core.location import PRESET_CITIES

    click.echo("Known city names:")
    click.echo("=" * 40)

    row = []
    for name, query in PRESET_CITIES.items():
        row.append(f"{name} ({query})")
        if len(row) == 4:
            click.echo("  " + ", ".join(row))
            row = []
    if row:
        click.echo("  " + ", ".join(row))

    click.echo("\n" + "=" * 40)
    click.echo("Usage: fishing-advisor --city 保定 advise")
    click.echo("\nAny other city name is passed to OpenWeatherMap unchanged.")


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
