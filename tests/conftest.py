import pytest
from core.config import SchedulerConfig


def make_sample(id="S001", priority="ROUTINE", analysis_type="BLOOD", duration=30, arrival="09:00", type="BLOOD"):
    return {
        "id": id,
        "type": type,
        "priority": priority,
        "analysisType": analysis_type,
        "analysisTime": duration,
        "arrivalTime": arrival,
        "patientInfo": {"age": 40, "service": "Emergency", "diagnosis": "n/a"},
    }


def make_technician(id="T001", specialty=("BLOOD",), efficiency=1.0, start="08:00", end="17:00", lunch=""):
    return {
        "id": id,
        "name": f"Tech {id}",
        "specialty": list(specialty),
        "efficiency": efficiency,
        "startTime": start,
        "endTime": end,
        "lunchBreak": lunch,
    }


def make_equipment(id="E001", type="BLOOD", maintenance="", cleaning=0, capacity=1):
    return {
        "id": id,
        "name": f"Analyzer {id}",
        "type": type,
        "compatibleTypes": [],
        "capacity": capacity,
        "maintenanceWindow": maintenance,
        "cleaningTime": cleaning,
    }


def make_lab(samples, technicians, equipment):
    return {"samples": samples, "technicians": technicians, "equipment": equipment}


@pytest.fixture
def config():
    return SchedulerConfig.from_constants(strict=True)


@pytest.fixture
def lenient_config():
    return SchedulerConfig.from_constants(strict=False)
