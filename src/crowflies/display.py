"""Terminal rendering of a LocationSession."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from crowflies.formatting import format_coordinate, format_summary
from crowflies.session import LocationSession, LocationStatus


def _status_line(session: LocationSession) -> Text | None:
    if session.status is LocationStatus.IDLE:
        return Text("No location selected", style="dim")
    if session.status is LocationStatus.LOCATING:
        return Text("Locating… (waiting for location service)", style="yellow")
    if session.status is LocationStatus.ERROR and session.error:
        return Text(f"Error: {session.error}", style="red")
    return None


def _positions_table(session: LocationSession) -> Table:
    table = Table.grid(expand=True, padding=(0, 2))
    table.add_column()
    table.add_column(justify="right")

    ref = session.reference
    right: Text | str = _status_line(session) or ""
    table.add_row(Text(ref.name, style="dim"), right)

    you = format_coordinate(session.position) if session.position else ""
    table.add_row(format_coordinate(ref.coordinate), Text("You", style="dim") if you else "")
    if you:
        table.add_row("", you)
    return table


def _distance_block(session: LocationSession) -> Text:
    km = session.distance_km()
    if km is None:
        return Text("Distance will appear here after you supply a location.", style="dim")

    text = Text()
    text.append("Distance (great-circle)\n", style="dim")
    text.append(f"{session.display_distance()}\n", style="bold")
    text.append(format_summary(km, session.bearing_deg()))
    return text


def build_panel(session: LocationSession) -> Panel:
    """Status-driven summary of the session, like the web widget's result card."""
    ref = session.reference
    return Panel(
        Group(_positions_table(session), Text(""), _distance_block(session)),
        title=f"Distance to {ref.name}",
        subtitle=f"{ref.name}: {ref.place}",
        border_style="red" if session.status is LocationStatus.ERROR else "blue",
    )
