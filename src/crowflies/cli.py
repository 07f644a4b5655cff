"""CLI entrypoint for crowflies."""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console
from rich.markup import escape

from crowflies.config import load_settings
from crowflies.display import build_panel
from crowflies.formatting import format_coordinate
from crowflies.locators import GeoIPLocationSource
from crowflies.references import get_reference
from crowflies.session import LocationSession, LocationStatus

console = Console()

UNIT_CHOICES = ["imperial", "metric", "mi", "km"]


def _show(session: LocationSession, as_json: bool) -> None:
    """Print the session and exit non-zero if it has no usable position."""
    ctx = click.get_current_context()
    if as_json:
        report = session.report()
        if session.status is LocationStatus.ERROR or report is None:
            console.print(f"[red]Error: {escape(str(session.error))}[/]")
            ctx.exit(1)
        click.echo(report.to_json())
        return

    console.print(build_panel(session))
    if session.status is LocationStatus.ERROR:
        ctx.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Crowflies — straight-line distance to Lambeau Field."""
    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = settings


# Negative coordinates look like short options to click
@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("latitude")
@click.argument("longitude")
@click.option("--unit", type=click.Choice(UNIT_CHOICES), default=None, help="Display unit (default from CROWFLIES_UNIT).")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON report instead of a panel.")
@click.pass_obj
def distance(settings, latitude: str, longitude: str, unit: str | None, as_json: bool):
    """Distance from a manually entered LATITUDE LONGITUDE."""
    session = LocationSession(reference=get_reference(), unit=unit or settings.unit)
    session.use_manual(latitude, longitude)
    _show(session, as_json)


@cli.command()
@click.option("--unit", type=click.Choice(UNIT_CHOICES), default=None, help="Display unit (default from CROWFLIES_UNIT).")
@click.option("--timeout", type=float, default=None, help="Seconds per request to the location service.")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON report instead of a panel.")
@click.pass_obj
def locate(settings, unit: str | None, timeout: float | None, as_json: bool):
    """Distance from this machine's approximate (IP-based) location."""
    locator = settings.locator
    if timeout is not None:
        locator.timeout_seconds = timeout
    session = LocationSession(
        reference=get_reference(),
        unit=unit or settings.unit,
        timeout=locator.overall_timeout(),
    )
    if not as_json:
        console.print("[yellow]Locating…[/]")
    asyncio.run(session.locate(GeoIPLocationSource(locator)))
    _show(session, as_json)


@cli.command()
def reference():
    """Show the fixed reference point."""
    ref = get_reference()
    console.print(f"[bold]{ref.name}[/] — {ref.place}")
    console.print(format_coordinate(ref.coordinate))


@cli.command("web")
@click.option("--port", default=8501, help="Streamlit port.")
def web(port: int):
    """Launch the Streamlit distance page."""
    import pathlib
    import subprocess
    import sys
    page = pathlib.Path(__file__).with_name("dashboard_web.py")
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(page),
        "--server.port", str(port),
        "--server.headless", "true",
    ])
