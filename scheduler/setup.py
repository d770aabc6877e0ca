import logging
from core.config import SchedulerConfig
from core.state import ScheduleState
from schemas.schedule.generate import LabData
from scheduler.rules.priority import sort_samples
from utils.time_utils import parse_window, to_minutes
from utils.validate import validate_analysis_types, validate_lab_data

logger = logging.getLogger(__name__)


def setup_state(data: LabData, config: SchedulerConfig) -> ScheduleState:
    """
    Validate the batch and prepare the state for one scheduling run.

    This function checks ids and time fields, optionally enforces that every analysis type is
    mapped (strict mode), converts shift bounds, lunch breaks and maintenance windows into
    minutes, and computes the processing order of the samples.

    Args:
        data (LabData): The input batch.
        config (SchedulerConfig): Urgency ranks and analysis-type table.

    Returns:
        ScheduleState: A fresh state with an empty agenda and schedule.

    Raises:
        InvalidTimeFormatError: If any time or window field is malformed.
        InputMismatchError: If ids are duplicated or a shift does not end after it starts.
        UnmappedAnalysisTypeError: In strict mode, if any sample's analysis type is unmapped.
    """
    for warning in validate_lab_data(data):
        logger.warning(warning)

    if config.strict:
        validate_analysis_types(data.samples, config)

    shift_bounds = {
        t.id: (to_minutes(t.startTime), to_minutes(t.endTime)) for t in data.technicians
    }
    lunch_breaks = {t.id: parse_window(t.lunchBreak) for t in data.technicians}
    maintenance_windows = {e.id: parse_window(e.maintenanceWindow) for e in data.equipment}

    order = sort_samples(data.samples, config)
    logger.info(f"Processing order: {', '.join(s.id for s in order)}")

    return ScheduleState(
        data=data,
        config=config,
        order=order,
        shift_bounds=shift_bounds,
        lunch_breaks=lunch_breaks,
        maintenance_windows=maintenance_windows,
    )
