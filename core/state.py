from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple
from core.agenda import Agenda
from core.config import SchedulerConfig
from schemas.schedule.generate import Equipment, LabData, Sample, Technician
from schemas.schedule.result import ScheduleEntry, UnscheduledSample

Window = Tuple[int, int]


@dataclass(frozen=True)
class Candidate:
    """
    A proposed placement of one sample on one (technician, equipment) pair.

    Slot rules return an adjusted copy, or None when the placement is infeasible.
    """

    sample: Sample
    technician: Technician
    equipment: Equipment
    start: int
    duration: int

    @property
    def end(self) -> int:
        return self.start + self.duration

    def shifted_to(self, start: int) -> "Candidate":
        return replace(self, start=start)


@dataclass
class ScheduleState:
    """
    A dataclass to hold all the state relevant to scheduling one lab batch.
    """

    # run inputs
    data: LabData
    """The validated input batch. Never mutated."""
    config: SchedulerConfig
    """Urgency ranks and analysis-type table for this run."""
    order: List[Sample]
    """Samples in processing order (urgency rank, then arrival)."""
    shift_bounds: Dict[str, Window]
    """Technician id -> (shift start, shift end) in minutes."""
    lunch_breaks: Dict[str, Optional[Window]]
    """Technician id -> lunch break in minutes, or None."""
    maintenance_windows: Dict[str, Optional[Window]]
    """Equipment id -> maintenance window in minutes, or None."""

    # collections to fill
    agenda: Agenda = field(default_factory=Agenda)
    """Next-available minute per technician and equipment unit."""
    schedule: List[ScheduleEntry] = field(default_factory=list)
    """Committed entries in commitment order."""
    unscheduled: List[UnscheduledSample] = field(default_factory=list)
    """Samples that produced no entry, with the reason."""

