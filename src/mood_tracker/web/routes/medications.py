"""Routes for the medication list."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...models.medication import Medication
from ...services import MoodTracker
from ..deps import get_tracker

router = APIRouter()


class MedicationCreate(BaseModel):
    name: str


@router.get("/", response_model=list[Medication])
async def list_medications(tracker: MoodTracker = Depends(get_tracker)):
    return tracker.medications.medications


@router.post("/", response_model=Medication, status_code=201)
async def add_medication(
    payload: MedicationCreate,
    tracker: MoodTracker = Depends(get_tracker),
):
    return tracker.medications.add(payload.name)


@router.delete("/{medication_id}", status_code=204)
async def remove_medication(
    medication_id: int,
    tracker: MoodTracker = Depends(get_tracker),
):
    if not tracker.medications.remove(medication_id):
        raise HTTPException(status_code=404, detail="Medication not found")


@router.post("/{medication_id}/toggle", response_model=list[int])
async def toggle_selection(
    medication_id: int,
    tracker: MoodTracker = Depends(get_tracker),
):
    """Tick or untick a medication for the next entry."""
    if tracker.medications.get(medication_id) is None:
        raise HTTPException(status_code=404, detail="Medication not found")
    tracker.medications.toggle(medication_id)
    return tracker.medications.selected_ids
