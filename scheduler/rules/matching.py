from typing import List, Optional, Sequence
from core.config import SchedulerConfig
from exceptions.custom_errors import UnmappedAnalysisTypeError
from schemas.schedule.generate import Equipment, Sample, Technician
from utils.constants import Specialty

"""
This module contains the specialty and resource compatibility rules for the lab scheduling problem.
"""


def resolve_specialty(sample: Sample, config: SchedulerConfig) -> Specialty:
    """Look up the specialty required by a sample's analysis type, failing on unknown types."""
    specialty = config.specialty_for(sample.analysisType)
    if specialty is None:
        raise UnmappedAnalysisTypeError(sample.id, sample.analysisType)
    return specialty


def compatible_technicians(
    specialty: Specialty, technicians: Sequence[Technician]
) -> List[Technician]:
    """Technicians whose specialty set contains the required specialty, in input order."""
    return [t for t in technicians if specialty in t.specialty]


def select_equipment(
    specialty: Specialty, equipment: Sequence[Equipment]
) -> Optional[Equipment]:
    """
    First equipment unit whose type equals the specialty.

    Only one unit is ever considered, even if several share the type; capacity is not
    used to admit concurrent samples.
    """
    for unit in equipment:
        if unit.type == specialty:
            return unit
    return None
