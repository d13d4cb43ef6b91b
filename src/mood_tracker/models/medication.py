"""Medication model."""

from pydantic import BaseModel, Field


class Medication(BaseModel):
    """A medication the user can tag entries with."""

    id: int
    name: str = Field(min_length=1)
