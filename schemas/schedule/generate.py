from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from utils.constants import MINUTES_PER_DAY, SampleType, Specialty, Urgency


# Define data models
class PatientInfo(BaseModel):
    """Patient context carried with a sample. Opaque to the scheduler."""

    model_config = ConfigDict(extra="allow")

    age: Optional[int] = None
    service: Optional[str] = None
    diagnosis: Optional[str] = None


class Sample(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    type: SampleType
    priority: Urgency
    analysisType: str
    analysisTime: int = Field(ge=0, le=MINUTES_PER_DAY, description="Nominal analysis duration in minutes")
    arrivalTime: str = Field(description="Arrival wall-clock time, 'HH:MM'")
    patientInfo: Optional[PatientInfo] = None

    @field_validator("id", "analysisType", "arrivalTime")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class Technician(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    specialty: List[Specialty]
    efficiency: float = Field(default=1.0, gt=0)
    startTime: str
    endTime: str
    lunchBreak: Optional[str] = ""

    @field_validator("specialty", mode="before")
    @classmethod
    def wrap_single_specialty(cls, value):
        """
        Accept a bare specialty string as a one-element list.

        Some exported rosters store a single specialty per technician rather than a list.
        """
        if isinstance(value, str):
            return [value]
        return value


class Equipment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    type: Specialty
    compatibleTypes: List[str] = Field(default_factory=list)
    capacity: int = Field(default=1, ge=1)
    maintenanceWindow: Optional[str] = ""
    cleaningTime: int = Field(default=0, ge=0)


class LabData(BaseModel):
    samples: List[Sample] = Field(default_factory=list)
    technicians: List[Technician] = Field(default_factory=list)
    equipment: List[Equipment] = Field(default_factory=list)
