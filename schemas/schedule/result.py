from pydantic import BaseModel, ConfigDict, Field
from typing import List
from utils.constants import Urgency


class ScheduleEntry(BaseModel):
    """One committed (sample, technician, equipment, interval) assignment."""

    model_config = ConfigDict(frozen=True)

    sampleId: str
    priority: Urgency
    technicianId: str
    equipmentId: str
    startTime: str
    endTime: str
    duration: int
    analysisType: str
    efficiency: float


class LabMetrics(BaseModel):
    totalTime: int = 0
    efficiency: int = 0
    conflicts: int = 0


class UnscheduledSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    sampleId: str
    priority: Urgency
    analysisType: str
    reason: str
    message: str


class LabOutput(BaseModel):
    schedule: List[ScheduleEntry] = Field(default_factory=list)
    metrics: LabMetrics = Field(default_factory=LabMetrics)
    unscheduled: List[UnscheduledSample] = Field(default_factory=list)
