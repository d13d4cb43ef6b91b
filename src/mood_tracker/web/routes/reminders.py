"""Routes for reminder times and notifications."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...services import MoodTracker
from ..deps import get_tracker

router = APIRouter()


class ReminderState(BaseModel):
    times: list[str]
    notifications_enabled: bool


class ReminderCreate(BaseModel):
    time: str


def _state(tracker: MoodTracker) -> ReminderState:
    return ReminderState(
        times=tracker.reminders.times,
        notifications_enabled=tracker.reminders.notifications_enabled,
    )


@router.get("/", response_model=ReminderState)
async def get_reminders(tracker: MoodTracker = Depends(get_tracker)):
    return _state(tracker)


@router.post("/", response_model=ReminderState)
async def add_reminder(
    payload: ReminderCreate,
    tracker: MoodTracker = Depends(get_tracker),
):
    tracker.reminders.add(payload.time)
    return _state(tracker)


@router.delete("/{reminder_time}", response_model=ReminderState)
async def remove_reminder(
    reminder_time: str,
    tracker: MoodTracker = Depends(get_tracker),
):
    if not tracker.reminders.remove(reminder_time):
        raise HTTPException(status_code=404, detail="Reminder not found")
    return _state(tracker)


@router.post("/notifications", response_model=ReminderState)
async def set_notifications(
    enabled: bool,
    tracker: MoodTracker = Depends(get_tracker),
):
    if enabled:
        tracker.reminders.enable()
    else:
        tracker.reminders.disable()
    return _state(tracker)
