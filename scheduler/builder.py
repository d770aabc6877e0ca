import logging
from typing import Any, Mapping, Optional, Union
from core.config import SchedulerConfig
from core.slot_manager import SlotRuleManager
from schemas.schedule.generate import LabData
from schemas.schedule.result import LabOutput
from scheduler.extractor import extract_output
from scheduler.rules import *
from scheduler.setup import setup_state
from scheduler.solver import assign_samples

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
)
logger = logging.getLogger(__name__)


# == Build Lab Schedule ==
def build_lab_schedule(
    data: Union[LabData, Mapping[str, Any]],
    config: Optional[SchedulerConfig] = None,
) -> LabOutput:
    """
    Assigns every sample in the batch to a (technician, equipment) pair and a time interval.

    Samples are processed strictly in priority order; each is committed to the compatible
    technician that can finish it earliest, honouring shift bounds, lunch breaks, maintenance
    windows and equipment cleaning time. Returns the schedule, its metrics and the samples
    that could not be placed.
    """
    if not isinstance(data, LabData):
        data = LabData.model_validate(data)
    config = config or SchedulerConfig.from_constants()

    logger.info(
        f"📋 Scheduling {len(data.samples)} samples on {len(data.technicians)} technicians "
        f"and {len(data.equipment)} equipment units..."
    )
    state = setup_state(data, config)

    slot_rules = SlotRuleManager(state)
    slot_rules.add_rule(maintenance_window_rule)  # Equipment maintenance window
    slot_rules.add_rule(lunch_break_rule)  # Technician lunch break
    slot_rules.add_rule(shift_end_rule)  # Must finish within the shift

    assign_samples(state, slot_rules)
    output = extract_output(state)
    logger.info("✅ Done!")
    return output
