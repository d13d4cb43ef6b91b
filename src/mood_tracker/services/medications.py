"""Medication registry."""

from typing import Iterable, Optional

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ..exceptions import EntryValidationError, ValidationReason
from ..models.medication import Medication
from ..utils.clock import Clock, system_clock
from ..utils.ids import IdGenerator
from .storage import MEDICATIONS_KEY, LocalStore

_medication_list = TypeAdapter(list[Medication])


class MedicationRegistry:
    """
    Owns the user's medication list and the ids ticked for the next entry.

    Entries copy medication names when they are created, so removing or
    re-adding a medication here never changes history.
    """

    def __init__(self, store: LocalStore, clock: Clock = system_clock):
        self.store = store
        self.ids = IdGenerator(clock)
        self._medications: list[Medication] = []
        self._selected: list[int] = []

    @property
    def medications(self) -> list[Medication]:
        return list(self._medications)

    def get(self, medication_id: int) -> Optional[Medication]:
        for medication in self._medications:
            if medication.id == medication_id:
                return medication
        return None

    def add(self, name: str) -> Medication:
        """Register a medication. Raises EntryValidationError for blank names."""
        name = (name or "").strip()
        if not name:
            raise EntryValidationError(ValidationReason.EMPTY_MEDICATION_NAME)

        medication = Medication(id=self.ids.next_id(), name=name)
        self._medications.append(medication)
        self.save()
        logger.info("Medication added: {} ({})", medication.name, medication.id)
        return medication

    def remove(self, medication_id: int) -> bool:
        """Remove a medication. Returns False if the id was unknown."""
        remaining = [m for m in self._medications if m.id != medication_id]
        if len(remaining) == len(self._medications):
            return False

        self._medications = remaining
        self._selected = [i for i in self._selected if i != medication_id]
        self.save()
        logger.info("Medication removed: {}", medication_id)
        return True

    def resolve_names(self, medication_ids: Iterable[int]) -> list[str]:
        """Names for ``medication_ids`` in the given order, skipping unknown ids."""
        names = []
        for medication_id in medication_ids:
            medication = self.get(medication_id)
            if medication is not None:
                names.append(medication.name)
        return names

    # Selection for the entry being composed

    @property
    def selected_ids(self) -> list[int]:
        return list(self._selected)

    def select(self, medication_id: int) -> None:
        if medication_id not in self._selected:
            self._selected.append(medication_id)

    def toggle(self, medication_id: int) -> bool:
        """Flip selection for ``medication_id``. Returns the new state."""
        if medication_id in self._selected:
            self._selected.remove(medication_id)
            return False
        self._selected.append(medication_id)
        return True

    def clear_selection(self) -> None:
        self._selected = []

    # Persistence

    def load(self) -> None:
        raw = self.store.load(MEDICATIONS_KEY)
        if raw is None:
            self._medications = []
            return
        try:
            self._medications = _medication_list.validate_python(raw)
        except ValidationError:
            logger.exception("Stored medications are malformed, starting empty")
            self._medications = []
            return
        for medication in self._medications:
            self.ids.observe(medication.id)

    def save(self) -> bool:
        return self.store.save(
            MEDICATIONS_KEY,
            _medication_list.dump_python(self._medications, mode="json"),
        )
