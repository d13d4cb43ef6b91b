"""Routes for mood entries."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...models.entry import RATING_FIELDS, MoodEntry, Ratings
from ...services import MoodTracker
from ..deps import get_tracker

router = APIRouter()


class EntryCreate(Ratings):
    """Form payload for a new entry."""

    notes: str = ""
    medication_ids: Optional[list[int]] = None  # None uses the current selection
    sleep: Optional[float] = None
    weight: Optional[float] = None


class EntryFormState(BaseModel):
    """What the entry form needs before the user starts typing."""

    is_first_entry_today: bool
    selected_medication_ids: list[int]


@router.get("/", response_model=list[MoodEntry])
async def list_entries(tracker: MoodTracker = Depends(get_tracker)):
    """All entries, newest first."""
    return tracker.entries.entries


@router.post("/", response_model=MoodEntry, status_code=201)
async def create_entry(
    payload: EntryCreate,
    tracker: MoodTracker = Depends(get_tracker),
):
    """Record an entry stamped with the current time."""
    ratings = Ratings(**{name: getattr(payload, name) for name in RATING_FIELDS})
    return tracker.entries.add_entry(
        ratings,
        notes=payload.notes,
        selected_medication_ids=payload.medication_ids,
        sleep=payload.sleep,
        weight=payload.weight,
    )


@router.get("/form", response_model=EntryFormState)
async def entry_form_state(tracker: MoodTracker = Depends(get_tracker)):
    """Whether the morning log fields apply, plus ticked medications."""
    return EntryFormState(
        is_first_entry_today=tracker.entries.is_first_entry_today(),
        selected_medication_ids=tracker.medications.selected_ids,
    )


@router.get("/dates", response_model=list[str])
async def list_dates(tracker: MoodTracker = Depends(get_tracker)):
    """Days with entries, most recent first."""
    return tracker.entries.dates_with_entries()


@router.get("/{entry_date}", response_model=list[MoodEntry])
async def entries_for_date(
    entry_date: str,
    tracker: MoodTracker = Depends(get_tracker),
):
    """One day's entries, earliest first."""
    entries = tracker.entries.entries_for_date(entry_date)
    if not entries:
        raise HTTPException(status_code=404, detail=f"No entries for {entry_date}")
    return entries
