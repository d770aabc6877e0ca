import math
from typing import Optional
from core.state import Candidate, ScheduleState
from core.slot_manager import SlotRuleManager
from schemas.schedule.generate import Equipment, Sample, Technician
from utils.constants import MINUTES_PER_DAY
from utils.time_utils import overlaps, round_half_up, to_minutes

"""
This module contains the time-window rules for the lab scheduling problem.

A candidate starts at the earliest minute at which the sample has arrived and both the
technician and the equipment unit are free. The window rules then push it past the
equipment's maintenance window and the technician's lunch break, and finally reject it
if it would run past the end of the technician's shift.

Rules are applied once, in registration order: a start moved past lunch is not re-checked
against maintenance.
"""


def real_duration(nominal: int, efficiency: float) -> int:
    """
    Nominal minutes scaled by technician efficiency (>1 is faster).

    Capped at a full day: a run that long never fits a shift, so shift_end_rule rejects it.
    """
    try:
        scaled = nominal / efficiency
    except OverflowError:
        return MINUTES_PER_DAY
    if not math.isfinite(scaled) or scaled >= MINUTES_PER_DAY:
        return MINUTES_PER_DAY
    return round_half_up(scaled)


def earliest_candidate(
    sample: Sample, technician: Technician, equipment: Equipment, state: ScheduleState
) -> Candidate:
    """Build the unadjusted candidate for one (sample, technician, equipment) triple."""
    shift_start, _ = state.shift_bounds[technician.id]
    tech_ready = state.agenda.technician_ready(technician.id, default=shift_start)
    equip_ready = state.agenda.equipment_ready(equipment.id, default=0)
    start = max(to_minutes(sample.arrivalTime), tech_ready, equip_ready)
    return Candidate(
        sample=sample,
        technician=technician,
        equipment=equipment,
        start=start,
        duration=real_duration(sample.analysisTime, technician.efficiency),
    )


def maintenance_window_rule(candidate: Candidate, state: ScheduleState) -> Optional[Candidate]:
    """Move the start past the equipment maintenance window if the run would overlap it."""
    window = state.maintenance_windows.get(candidate.equipment.id)
    if overlaps(candidate.start, candidate.end, window):
        return candidate.shifted_to(max(candidate.start, window[1]))
    return candidate


def lunch_break_rule(candidate: Candidate, state: ScheduleState) -> Optional[Candidate]:
    """Move the start to the end of the technician's lunch break if the run would overlap it."""
    window = state.lunch_breaks.get(candidate.technician.id)
    if overlaps(candidate.start, candidate.end, window):
        return candidate.shifted_to(window[1])
    return candidate


def shift_end_rule(candidate: Candidate, state: ScheduleState) -> Optional[Candidate]:
    """Reject the candidate if it ends after the technician's shift."""
    _, shift_end = state.shift_bounds[candidate.technician.id]
    if candidate.end > shift_end:
        return None
    return candidate


def compute_slot(
    sample: Sample,
    technician: Technician,
    equipment: Equipment,
    manager: SlotRuleManager,
) -> Optional[Candidate]:
    """Earliest feasible placement for the triple, or None if it cannot finish within the shift."""
    candidate = earliest_candidate(sample, technician, equipment, manager.state)
    return manager.apply_all(candidate)
