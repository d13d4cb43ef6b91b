"""Command-line interface for Mood Tracker."""

from datetime import date, datetime, timedelta
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .exceptions import EntryValidationError
from .models.entry import MoodEntry, Ratings
from .models.metrics import TimeRange
from .services import MoodTracker
from .utils.logger import setup_logging

app = typer.Typer(
    name="mood",
    help="Mood Tracker - Log mood, sleep and medications and review trends",
    no_args_is_help=True,
)
meds_app = typer.Typer(help="Manage the medication list", no_args_is_help=True)
reminders_app = typer.Typer(help="Manage reminder times and notifications", no_args_is_help=True)
app.add_typer(meds_app, name="meds")
app.add_typer(reminders_app, name="reminders")

console = Console()


@app.callback()
def main() -> None:
    setup_logging()


def open_tracker() -> MoodTracker:
    """Build and load the tracker for one command."""
    return MoodTracker.open()


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """Parse a date string.

    Supports:
    - None or empty: no date
    - "today": today
    - "yesterday": yesterday
    - "-N": N days ago (e.g., "-1" = yesterday, "-7" = a week ago)
    - "YYYY-MM-DD": specific date
    """
    if not date_str:
        return None

    if date_str.lower() == "today":
        return date.today()

    if date_str.lower() == "yesterday":
        return date.today() - timedelta(days=1)

    # Relative days: -1, -2, -7, etc.
    if date_str.startswith("-") and date_str[1:].isdigit():
        days_ago = int(date_str[1:])
        return date.today() - timedelta(days=days_ago)

    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Invalid date format: {date_str}[/red]")
        console.print("[dim]Use: YYYY-MM-DD, 'yesterday', or -N (days ago)[/dim]")
        raise typer.Exit(1)


def _long_date(day: str) -> str:
    return date.fromisoformat(day).strftime("%A, %B %d, %Y")


def _rating_table(entries: list[MoodEntry], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Time", style="cyan")
    table.add_column("Anxiety", justify="center", style="red")
    table.add_column("Irritability", justify="center", style="dark_orange")
    table.add_column("Depressed", justify="center", style="blue")
    table.add_column("Elevated", justify="center", style="yellow")
    table.add_column("Energy", justify="center", style="green")
    table.add_column("Medications")
    table.add_column("Notes", style="dim")

    for entry in entries:
        table.add_row(
            entry.time,
            str(entry.anxiety),
            str(entry.irritability),
            str(entry.depressed_mood),
            str(entry.elevated_mood),
            str(entry.energy),
            ", ".join(entry.medications) or "-",
            entry.notes or "",
        )
    return table


def _morning_log_line(sleep: Optional[float], weight: Optional[float]) -> Optional[str]:
    parts = []
    if sleep is not None:
        parts.append(f"Sleep: {sleep:g} hours")
    if weight is not None:
        parts.append(f"Weight: {weight:g} kg")
    return "  ".join(parts) or None


@app.command()
def add(
    anxiety: int = typer.Option(5, "--anxiety", "-a", min=1, max=10),
    irritability: int = typer.Option(5, "--irritability", "-i", min=1, max=10),
    depressed: int = typer.Option(5, "--depressed", "-d", min=1, max=10),
    elevated: int = typer.Option(5, "--elevated", "-e", min=1, max=10),
    energy: int = typer.Option(5, "--energy", "-g", min=1, max=10),
    notes: str = typer.Option("", "--notes", "-n", help="Free-text notes"),
    med: Optional[list[int]] = typer.Option(
        None, "--med", "-m",
        help="Medication id taken (repeatable). See 'mood meds list'.",
    ),
    sleep: Optional[float] = typer.Option(
        None, "--sleep", "-s",
        help="Hours slept (first entry of the day only)",
    ),
    weight: Optional[float] = typer.Option(
        None, "--weight", "-w",
        help="Weight in kg (first entry of the day only)",
    ),
):
    """Log a new mood entry."""
    with open_tracker() as tracker:
        first_today = tracker.entries.is_first_entry_today()
        if not first_today and (sleep is not None or weight is not None):
            console.print("[dim]Sleep and weight are only recorded with the day's first entry[/dim]")

        try:
            entry = tracker.entries.add_entry(
                Ratings(
                    anxiety=anxiety,
                    irritability=irritability,
                    depressed_mood=depressed,
                    elevated_mood=elevated,
                    energy=energy,
                ),
                notes=notes,
                selected_medication_ids=med or [],
                sleep=sleep,
                weight=weight,
            )
        except (EntryValidationError, ValidationError) as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

        console.print(Panel(
            entry.summary(),
            title=f"✅ Entry saved - {_long_date(entry.date)}",
            style="green",
        ))


@app.command()
def history(
    date_str: Optional[str] = typer.Argument(
        None,
        help="Date to show (YYYY-MM-DD). Defaults to the most recent day with entries.",
    ),
):
    """Show every entry for one day."""
    with open_tracker() as tracker:
        day = parse_date(date_str)
        if day is None:
            dates = tracker.entries.dates_with_entries()
            if not dates:
                console.print("[yellow]No entries yet[/yellow]")
                raise typer.Exit(0)
            day_str = dates[0]
        else:
            day_str = day.isoformat()

        entries = tracker.entries.entries_for_date(day_str)
        if not entries:
            console.print(f"[yellow]No entries found for {day_str}[/yellow]")
            raise typer.Exit(0)

        console.print(_rating_table(entries, f"📔 {_long_date(day_str)}"))
        morning = next((e for e in entries if e.has_morning_log), None)
        if morning:
            console.print(_morning_log_line(morning.sleep, morning.weight))


@app.command()
def dates(
    days: int = typer.Option(
        30, "--days", "-n",
        help="Number of days to show",
    ),
):
    """List days that have entries, most recent first."""
    with open_tracker() as tracker:
        all_dates = tracker.entries.dates_with_entries()

        if not all_dates:
            console.print("[yellow]No entries found[/yellow]")
            raise typer.Exit(0)

        table = Table(title="Days with entries")
        table.add_column("Date", style="cyan")
        table.add_column("Entries", justify="center")

        for day in all_dates[:days]:
            table.add_row(day, str(len(tracker.entries.entries_for_date(day))))

        console.print(table)


@app.command()
def trends(
    time_range: TimeRange = typer.Option(
        TimeRange.WEEK, "--range", "-r",
        help="Lookback window",
    ),
):
    """Show daily average ratings over a time window."""
    with open_tracker() as tracker:
        metrics = tracker.aggregation.aggregate(time_range)

    if not metrics:
        console.print(f"[yellow]No entries in the last {time_range.value}[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Daily averages ({time_range.value})")
    table.add_column("Day", style="cyan")
    table.add_column("Anxiety", justify="right", style="red")
    table.add_column("Irritability", justify="right", style="dark_orange")
    table.add_column("Depressed", justify="right", style="blue")
    table.add_column("Elevated", justify="right", style="yellow")
    table.add_column("Energy", justify="right", style="green")
    table.add_column("Sleep", justify="right")
    table.add_column("Weight", justify="right")

    for day in metrics:
        table.add_row(
            day.label,
            f"{day.anxiety:.1f}",
            f"{day.irritability:.1f}",
            f"{day.depressed_mood:.1f}",
            f"{day.elevated_mood:.1f}",
            f"{day.energy:.1f}",
            f"{day.sleep:g}" if day.sleep is not None else "-",
            f"{day.weight:g}" if day.weight is not None else "-",
        )

    console.print(table)


@app.command()
def export(
    start: Optional[str] = typer.Option(None, "--start", help="First date (inclusive)"),
    end: Optional[str] = typer.Option(None, "--end", help="Last date (inclusive)"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """Print entries grouped by day for a date range."""
    with open_tracker() as tracker:
        report = tracker.export.build_report(parse_date(start), parse_date(end))

    if json_output:
        console.print_json(report.model_dump_json(by_alias=True))
        return

    console.print(Panel(
        f"Generated: {report.generated_at:%Y-%m-%d %H:%M}\n"
        + (f"Date Range: {report.range_label}" if report.range_label else "All entries"),
        title="Mood Tracker Report",
    ))

    for day in report.days:
        console.print(_rating_table(day.entries, _long_date(day.date)))
        line = _morning_log_line(day.sleep, day.weight)
        if line:
            console.print(line)

    console.print(f"\n{report.entry_count} entries across {len(report.days)} days")


@app.command()
def status():
    """Show configuration and data status."""
    from .utils.config import get_settings

    settings = get_settings()

    with open_tracker() as tracker:
        table = Table(title="Configuration Status")
        table.add_column("Item", style="cyan")
        table.add_column("Status", justify="center")

        table.add_row(
            "Push notifications (OneSignal)",
            "[green]✓ Configured[/green]" if settings.has_notifications else "[yellow]Not configured[/yellow]",
        )
        table.add_row(
            "Reminders",
            "[green]Enabled[/green]" if tracker.reminders.notifications_enabled else "Disabled",
        )
        table.add_row("Entries", str(len(tracker.entries)))
        table.add_row("Medications", str(len(tracker.medications.medications)))

        console.print(table)
        console.print(f"\nData file: {tracker.store.db_path.absolute()}")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
):
    """Start the JSON API."""
    import uvicorn

    console.print(f"[green]Starting API at http://{host}:{port}[/green]")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "mood_tracker.web.app:app",
        host=host,
        port=port,
    )


# Medications

@meds_app.command("list")
def meds_list():
    """List medications."""
    with open_tracker() as tracker:
        medications = tracker.medications.medications

    if not medications:
        console.print("[yellow]No medications added yet[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Medications")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    for medication in medications:
        table.add_row(str(medication.id), medication.name)
    console.print(table)


@meds_app.command("add")
def meds_add(name: str = typer.Argument(..., help="Medication name")):
    """Add a medication."""
    with open_tracker() as tracker:
        try:
            medication = tracker.medications.add(name)
        except EntryValidationError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
    console.print(f"[green]✓ Medication added:[/green] {medication.name} (id {medication.id})")


@meds_app.command("remove")
def meds_remove(medication_id: int = typer.Argument(..., help="Medication id")):
    """Remove a medication. Past entries keep its name."""
    with open_tracker() as tracker:
        removed = tracker.medications.remove(medication_id)
    if not removed:
        console.print(f"[yellow]No medication with id {medication_id}[/yellow]")
        raise typer.Exit(1)
    console.print("[green]✓ Medication removed[/green]")


# Reminders

@reminders_app.command("list")
def reminders_list():
    """Show reminder times."""
    with open_tracker() as tracker:
        times = tracker.reminders.times
        enabled = tracker.reminders.notifications_enabled

    state = "[green]enabled[/green]" if enabled else "[yellow]disabled[/yellow]"
    console.print(f"Notifications {state}")
    for reminder_time in times:
        console.print(f"  • {reminder_time}")


@reminders_app.command("add")
def reminders_add(reminder_time: str = typer.Argument(..., help="Time as HH:MM")):
    """Add a reminder time."""
    with open_tracker() as tracker:
        try:
            added = tracker.reminders.add(reminder_time)
        except EntryValidationError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
    if added:
        console.print(f"[green]✓ Reminder added:[/green] {reminder_time}")
    else:
        console.print(f"[dim]{reminder_time} is already a reminder[/dim]")


@reminders_app.command("remove")
def reminders_remove(reminder_time: str = typer.Argument(..., help="Time as HH:MM")):
    """Remove a reminder time."""
    with open_tracker() as tracker:
        removed = tracker.reminders.remove(reminder_time)
    if not removed:
        console.print(f"[yellow]No reminder at {reminder_time}[/yellow]")
        raise typer.Exit(1)
    console.print("[green]✓ Reminder removed[/green]")


@reminders_app.command("enable")
def reminders_enable():
    """Turn on push reminders."""
    with open_tracker() as tracker:
        tracker.reminders.enable()
    console.print("[green]✓ Notifications enabled[/green]")


@reminders_app.command("disable")
def reminders_disable():
    """Turn off push reminders."""
    with open_tracker() as tracker:
        tracker.reminders.disable()
    console.print("[green]✓ Notifications disabled[/green]")


if __name__ == "__main__":
    app()
