from typing import Iterable, Optional
from core.state import Candidate, ScheduleState
from schemas.schedule.result import ScheduleEntry
from utils.time_utils import to_clock

"""
This module contains the candidate selection and commitment rules for the lab scheduling problem.
"""


def select_candidate(candidates: Iterable[Candidate]) -> Optional[Candidate]:
    """
    Pick the feasible candidate that finishes earliest.

    Ties on the end minute go to the lowest technician id so the result does not depend on
    roster order.
    """
    best = None
    for candidate in candidates:
        if candidate is None:
            continue
        if best is None or (candidate.end, candidate.technician.id) < (best.end, best.technician.id):
            best = candidate
    return best


def commit_candidate(state: ScheduleState, candidate: Candidate) -> ScheduleEntry:
    """Update the agenda for both resources and append the schedule entry."""
    state.agenda.commit(
        candidate.technician.id,
        candidate.equipment.id,
        candidate.end,
        candidate.equipment.cleaningTime,
    )
    entry = ScheduleEntry(
        sampleId=candidate.sample.id,
        priority=candidate.sample.priority,
        technicianId=candidate.technician.id,
        equipmentId=candidate.equipment.id,
        startTime=to_clock(candidate.start),
        endTime=to_clock(candidate.end),
        duration=candidate.duration,
        analysisType=candidate.sample.analysisType,
        efficiency=candidate.technician.efficiency,
    )
    state.schedule.append(entry)
    return entry
