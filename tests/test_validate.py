import pytest
from conftest import make_equipment, make_lab, make_sample, make_technician
from exceptions.custom_errors import InputMismatchError, InvalidTimeFormatError, UnmappedAnalysisTypeError
from schemas.schedule.generate import LabData
from schemas.schedule.result import LabOutput, ScheduleEntry
from utils.validate import validate_analysis_types, validate_lab_data, validate_schedule


def lab(samples=None, technicians=None, equipment=None):
    return LabData.model_validate(
        make_lab(
            samples if samples is not None else [make_sample()],
            technicians if technicians is not None else [make_technician()],
            equipment if equipment is not None else [make_equipment()],
        )
    )


def entry(sample_id, start, end, tech="T001", unit="E001"):
    return ScheduleEntry(
        sampleId=sample_id,
        priority="ROUTINE",
        technicianId=tech,
        equipmentId=unit,
        startTime=start,
        endTime=end,
        duration=30,
        analysisType="BLOOD",
        efficiency=1.0,
    )


def test_clean_batch_has_no_warnings():
    assert validate_lab_data(lab()) == []


def test_duplicate_ids_are_listed():
    with pytest.raises(InputMismatchError) as exc:
        validate_lab_data(lab(equipment=[make_equipment("E001"), make_equipment("E001")]))
    assert "Duplicate equipment ids: E001" in str(exc.value)


def test_technician_and_equipment_may_share_an_id():
    data = lab(technicians=[make_technician("R1")], equipment=[make_equipment("R1")])
    assert validate_lab_data(data) == []


def test_inverted_shift_is_rejected():
    with pytest.raises(InputMismatchError):
        validate_lab_data(lab(technicians=[make_technician(start="17:00", end="08:00")]))


@pytest.mark.parametrize(
    "overrides",
    [
        {"samples": [make_sample(arrival="25:00")]},
        {"technicians": [make_technician(end="5pm")]},
        {"technicians": [make_technician(lunch="13:00-12:00")]},
        {"equipment": [make_equipment(maintenance="10:00 to 11:00")]},
    ],
)
def test_malformed_times_raise(overrides):
    with pytest.raises(InvalidTimeFormatError):
        validate_lab_data(lab(**overrides))


def test_accepted_but_ignored_fields_produce_warnings():
    warnings = validate_lab_data(
        lab(technicians=[make_technician(lunch="17:30-18:00")], equipment=[make_equipment(capacity=3)])
    )
    assert len(warnings) == 2
    assert "outside the shift" in warnings[0]
    assert "capacity 3" in warnings[1]


def test_analysis_types_are_checked_in_order(config):
    samples = lab(samples=[make_sample("S001", analysis_type=" glucose "), make_sample("S002", analysis_type="X")]).samples
    with pytest.raises(UnmappedAnalysisTypeError) as exc:
        validate_analysis_types(samples, config)
    assert (exc.value.sample_id, exc.value.analysis_type) == ("S002", "X")


def test_consistent_schedule_passes():
    data = lab(samples=[make_sample("S001"), make_sample("S002")], equipment=[make_equipment(cleaning=10)])
    output = LabOutput(schedule=[entry("S001", "09:00", "09:30"), entry("S002", "09:40", "10:10")])
    assert validate_schedule(data, output) == []


def test_schedule_violations_are_reported():
    data = lab(
        samples=[make_sample("S001"), make_sample("S002"), make_sample("S003", arrival="16:00")],
        technicians=[make_technician("T001"), make_technician("T002")],
        equipment=[make_equipment(cleaning=10)],
    )
    output = LabOutput(
        schedule=[
            entry("S001", "09:00", "09:30"),
            entry("S002", "09:35", "10:05", tech="T002"),
            entry("S003", "08:30", "17:30", tech="T001", unit="E002"),
        ]
    )
    violations = validate_schedule(data, output)
    assert any("Equipment E001 is double-booked" in v for v in violations)
    assert any("before arrival" in v for v in violations)
    assert any("after T001's shift end" in v for v in violations)
    assert any("Technician T001 is double-booked" in v for v in violations)
