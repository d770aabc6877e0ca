import logging
import pandas as pd
from typing import List
from core.state import ScheduleState
from schemas.schedule.result import LabMetrics, LabOutput, ScheduleEntry, UnscheduledSample
from utils.time_utils import round_half_up, to_clock, to_minutes

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    "priority",
    "sampleId",
    "analysisType",
    "technicianId",
    "equipmentId",
    "startTime",
    "endTime",
    "duration",
    "efficiency",
]


def compute_metrics(
    schedule: List[ScheduleEntry], unscheduled: List[UnscheduledSample]
) -> LabMetrics:
    """
    Derive aggregate metrics from a finished schedule.

    - totalTime: minutes from the earliest start to the latest end (makespan)
    - efficiency: summed analysis minutes as a percentage of the makespan
    - conflicts: number of samples that could not be scheduled

    Efficiency can exceed 100 when several resources work in parallel.
    """
    if not schedule:
        return LabMetrics(totalTime=0, efficiency=0, conflicts=len(unscheduled))

    ordered = sorted(schedule, key=lambda e: to_minutes(e.startTime))
    first_start = to_minutes(ordered[0].startTime)
    last_end = max(to_minutes(e.endTime) for e in ordered)
    total_time = last_end - first_start
    total_analysis = sum(e.duration for e in ordered)
    efficiency = round_half_up(total_analysis / total_time * 100) if total_time > 0 else 0

    return LabMetrics(totalTime=total_time, efficiency=efficiency, conflicts=len(unscheduled))


def extract_output(state: ScheduleState) -> LabOutput:
    """Assemble the output structure once every sample has been processed."""
    metrics = compute_metrics(state.schedule, state.unscheduled)
    logger.info(
        f"📊 Makespan = {metrics.totalTime} min; efficiency = {metrics.efficiency}%; conflicts = {metrics.conflicts}"
    )
    return LabOutput(
        schedule=list(state.schedule),
        metrics=metrics,
        unscheduled=list(state.unscheduled),
    )


def schedule_to_frame(output: LabOutput) -> pd.DataFrame:
    """Tabular view of the schedule in processing order, one row per entry."""
    rows = [e.model_dump(mode="json") for e in output.schedule]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def unscheduled_to_frame(output: LabOutput) -> pd.DataFrame:
    rows = [u.model_dump(mode="json") for u in output.unscheduled]
    return pd.DataFrame(rows, columns=["sampleId", "priority", "analysisType", "reason", "message"])


def utilisation_summary(output: LabOutput) -> pd.DataFrame:
    """
    Per-resource summary of the schedule.

    One row per technician and per equipment unit that received work, with the number of
    samples handled, busy minutes, and the first start / last end on that resource.
    """
    columns = ["resource", "kind", "samples", "busyMinutes", "firstStart", "lastEnd"]
    df = schedule_to_frame(output)
    if df.empty:
        return pd.DataFrame(columns=columns)

    df["start"] = df["startTime"].map(to_minutes)
    df["end"] = df["endTime"].map(to_minutes)

    frames = []
    for kind, key in (("technician", "technicianId"), ("equipment", "equipmentId")):
        grouped = (
            df.groupby(key)
            .agg(
                samples=("sampleId", "count"),
                busyMinutes=("duration", "sum"),
                firstStart=("start", "min"),
                lastEnd=("end", "max"),
            )
            .reset_index()
            .rename(columns={key: "resource"})
        )
        grouped.insert(1, "kind", kind)
        frames.append(grouped)

    summary = pd.concat(frames, ignore_index=True)
    for col in ("firstStart", "lastEnd"):
        summary[col] = summary[col].map(lambda m: to_clock(int(m)))
    return summary[columns]
