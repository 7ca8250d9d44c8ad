"""
Console report of a screening schedule built from the seed catalogue.

Walks the whole pipeline:
1. Configuration and logging
2. Catalogue and user selections in an in-memory store
3. Schedule derivation, including a malformed guideline
4. Relevance-ranked browsing view
5. Marking a screening completed

Run with: uv run python show_schedule.py [DATE_OF_BIRTH] [GENDER]
"""

import asyncio
import sys
from datetime import date

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from adapters.records import guidelines_from_records
from screenwise.config import get_config
from screenwise.data.catalog import seed_guidelines
from screenwise.domain.models import (
    Guideline,
    Person,
    ScheduleEntry,
    ScreeningStatus,
)
from screenwise.observability import configure_logging
from screenwise.services.catalog import GuidelineCatalog, InMemoryGuidelineStore
from screenwise.services.filters import recommend
from screenwise.services.relevance import relevance_score
from screenwise.services.screening import ScreeningService

console = Console()

STATUS_STYLES = {
    ScreeningStatus.COMPLETED: "green",
    ScreeningStatus.DUE: "yellow",
    ScreeningStatus.OVERDUE: "red",
    ScreeningStatus.UPCOMING: "cyan",
}

USER_ID = "demo-user"


def schedule_table(title: str, entries: list[ScheduleEntry]) -> Table:
    table = Table(title=title)
    table.add_column("Screening", style="cyan")
    table.add_column("Status")
    table.add_column("Due", style="magenta")
    table.add_column("Frequency", style="white")
    table.add_column("Notes", style="dim")

    for entry in entries:
        style = STATUS_STYLES[entry.status]
        table.add_row(
            entry.name,
            f"[{style}]{entry.status.value}[/{style}]",
            entry.due_date_display,
            entry.frequency_text,
            entry.notes or "",
        )
    return table


def relevance_table(guidelines: list[Guideline], age: int) -> Table:
    table = Table(title=f"Guidelines by relevance (age {age})")
    table.add_column("Guideline", style="cyan")
    table.add_column("Score", style="green")
    table.add_column("Bands", style="yellow")
    for guideline in guidelines:
        bands = ", ".join(band.label for band in guideline.age_ranges) or "-"
        table.add_row(guideline.name, str(relevance_score(guideline, age)), bands)
    return table


async def run_report(date_of_birth: date, gender: str) -> None:
    config = get_config()
    configure_logging(config.logging)
    today = date.today()

    person = Person.from_date_of_birth(date_of_birth, gender, today, user_id=USER_ID)
    console.print(
        Panel(
            f"Age {person.age}, {person.gender.value} | environment {config.environment}",
            title="Screening schedule",
            style="bold blue",
        )
    )

    # An imported row with a non-numeric age shows how one bad guideline is contained
    [broken] = guidelines_from_records(
        [
            {
                "id": "broken_record",
                "name": "Imported Guideline (bad ages)",
                "visibility": "public",
                "guideline_age_ranges": [{"min_age": "forty", "max_age": 49}],
            }
        ]
    )
    catalog = GuidelineCatalog(InMemoryGuidelineStore([*seed_guidelines(), broken]))

    recommendations = recommend(
        await catalog.visible_to(USER_ID), person, years_ahead=config.schedule.upcoming_years
    )
    for rec in [*recommendations.current, *recommendations.upcoming]:
        await catalog.select(USER_ID, rec.guideline.id)
    await catalog.select(USER_ID, broken.id)

    async def load_profile(user_id: str) -> Person | None:
        return person if user_id == USER_ID else None

    service = ScreeningService(catalog, load_profile, config=config)

    schedule = await service.schedule_for(USER_ID, today, sort="due_date")
    console.print(schedule_table("Selected screenings", schedule))

    ranked = await service.ranked_for(USER_ID)
    console.print(relevance_table(ranked, person.age))

    due_now = next((e for e in schedule if e.status == ScreeningStatus.DUE), None)
    if due_now is None:
        console.print("Nothing due right now", style="green")
        return

    updated, entry = await service.complete(USER_ID, due_now.guideline_id, today)
    console.print(
        f"Marked [cyan]{entry.name}[/cyan] completed; next due "
        f"[magenta]{updated.next_due_date}[/magenta]"
    )


if __name__ == "__main__":
    dob = date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else date(1986, 6, 15)
    gender = sys.argv[2] if len(sys.argv) > 2 else "female"
    try:
        asyncio.run(run_report(dob, gender))
    except KeyboardInterrupt:
        console.print("\nStopped by user", style="yellow")
