from collections import Counter, defaultdict
from typing import Iterable, List
from core.config import SchedulerConfig
from exceptions.custom_errors import InputMismatchError, UnmappedAnalysisTypeError
from schemas.schedule.generate import LabData, Sample
from schemas.schedule.result import LabOutput
from utils.time_utils import parse_window, to_minutes


def _duplicates(ids: Iterable[str]) -> List[str]:
    return sorted(i for i, n in Counter(ids).items() if n > 1)


def validate_lab_data(data: LabData) -> List[str]:
    """
    Validate a lab batch before scheduling.

    Every time field is parsed, so malformed values surface as InvalidTimeFormatError here
    rather than mid-batch. Duplicate ids and shifts that do not end after they start raise
    InputMismatchError.

    Returns:
        List[str]: Warnings about data that is accepted but has no effect on allocation.
    """
    errors = []
    for label, ids in (
        ("samples", [s.id for s in data.samples]),
        ("technicians", [t.id for t in data.technicians]),
        ("equipment", [e.id for e in data.equipment]),
    ):
        dupes = _duplicates(ids)
        if dupes:
            errors.append(f" • Duplicate {label} ids: {', '.join(dupes)}\n")

    for sample in data.samples:
        to_minutes(sample.arrivalTime)

    warnings = []
    for tech in data.technicians:
        start, end = to_minutes(tech.startTime), to_minutes(tech.endTime)
        if end <= start:
            errors.append(
                f" • Technician {tech.id} shift {tech.startTime}-{tech.endTime} must end after it starts.\n"
            )
        lunch = parse_window(tech.lunchBreak)
        if lunch and (lunch[0] < start or lunch[1] > end):
            warnings.append(f"Technician {tech.id} lunch break {tech.lunchBreak} lies outside the shift.")

    for unit in data.equipment:
        parse_window(unit.maintenanceWindow)
        if unit.capacity > 1:
            warnings.append(
                f"Equipment {unit.id} declares capacity {unit.capacity}; units are scheduled one sample at a time."
            )

    if errors:
        errors.insert(0, "Recheck your inputs:\n")
        raise InputMismatchError("".join(errors))
    return warnings


def validate_analysis_types(samples: Iterable[Sample], config: SchedulerConfig):
    """Raise UnmappedAnalysisTypeError for the first sample whose analysis type has no mapping."""
    for sample in samples:
        if config.specialty_for(sample.analysisType) is None:
            raise UnmappedAnalysisTypeError(sample.id, sample.analysisType)


def validate_schedule(data: LabData, output: LabOutput) -> List[str]:
    """
    Re-check a finished schedule against the allocation invariants.

    - a technician's intervals never overlap
    - an equipment unit's intervals, including its trailing cleaning time, never overlap
    - every entry starts at or after its sample's arrival
    - every entry ends by its technician's shift end

    Returns:
        List[str]: One message per violation; empty if the schedule is consistent.
    """
    samples = {s.id: s for s in data.samples}
    technicians = {t.id: t for t in data.technicians}
    equipment = {e.id: e for e in data.equipment}
    violations = []

    by_tech = defaultdict(list)
    by_unit = defaultdict(list)
    for entry in output.schedule:
        start, end = to_minutes(entry.startTime), to_minutes(entry.endTime)
        cleaning = equipment[entry.equipmentId].cleaningTime if entry.equipmentId in equipment else 0
        by_tech[entry.technicianId].append((start, end, entry.sampleId))
        by_unit[entry.equipmentId].append((start, end + cleaning, entry.sampleId))

        sample = samples.get(entry.sampleId)
        if sample is not None and start < to_minutes(sample.arrivalTime):
            violations.append(f"{entry.sampleId} starts at {entry.startTime} before arrival {sample.arrivalTime}.")
        tech = technicians.get(entry.technicianId)
        if tech is not None and end > to_minutes(tech.endTime):
            violations.append(f"{entry.sampleId} ends at {entry.endTime} after {tech.id}'s shift end {tech.endTime}.")

    for label, groups in (("Technician", by_tech), ("Equipment", by_unit)):
        for resource_id, intervals in groups.items():
            intervals.sort()
            for (s1, e1, a), (s2, e2, b) in zip(intervals, intervals[1:]):
                if s2 < e1:
                    violations.append(f"{label} {resource_id} is double-booked by {a} and {b}.")
    return violations
