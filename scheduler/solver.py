import logging
from core.drop_reasons import DROP_REASONS
from core.slot_manager import SlotRuleManager
from core.state import ScheduleState
from exceptions.custom_errors import UnmappedAnalysisTypeError
from schemas.schedule.generate import Sample
from schemas.schedule.result import UnscheduledSample
from scheduler.rules.matching import compatible_technicians, resolve_specialty, select_equipment
from scheduler.rules.selection import commit_candidate, select_candidate
from scheduler.rules.slots import compute_slot

logger = logging.getLogger(__name__)


def drop_sample(state: ScheduleState, sample: Sample, code: str, **details) -> UnscheduledSample:
    """Record a sample that cannot be placed and carry on with the batch."""
    message = DROP_REASONS[code].message.format(**details)
    dropped = UnscheduledSample(
        sampleId=sample.id,
        priority=sample.priority,
        analysisType=sample.analysisType,
        reason=code,
        message=message,
    )
    state.unscheduled.append(dropped)
    logger.warning(f"⚠️ Sample {sample.id} not scheduled: {message}")
    return dropped


def assign_samples(state: ScheduleState, slot_rules: SlotRuleManager) -> ScheduleState:
    """
    Greedily place every sample, in processing order.

    For each sample the required specialty is resolved, the compatible technicians and the
    equipment unit are found, the earliest feasible slot is computed per technician, and the
    candidate finishing earliest is committed. A sample that cannot be placed is recorded in
    `state.unscheduled` and the loop continues.
    """
    for sample in state.order:
        try:
            specialty = resolve_specialty(sample, state.config)
        except UnmappedAnalysisTypeError:
            if state.config.strict:
                raise
            drop_sample(state, sample, "UNMAPPED_ANALYSIS_TYPE", analysis_type=sample.analysisType)
            continue

        technicians = compatible_technicians(specialty, state.data.technicians)
        if not technicians:
            drop_sample(state, sample, "NO_TECHNICIAN", specialty=specialty.value)
            continue

        unit = select_equipment(specialty, state.data.equipment)
        if unit is None:
            drop_sample(state, sample, "NO_EQUIPMENT", specialty=specialty.value)
            continue

        best = select_candidate(compute_slot(sample, t, unit, slot_rules) for t in technicians)
        if best is None:
            drop_sample(state, sample, "NO_FEASIBLE_SLOT")
            continue

        entry = commit_candidate(state, best)
        logger.debug(
            f"{entry.sampleId} -> {entry.technicianId}/{entry.equipmentId} "
            f"{entry.startTime}-{entry.endTime} ({entry.duration} min)"
        )

    logger.info(f"→ scheduled = {len(state.schedule)},  unscheduled = {len(state.unscheduled)}")
    return state
