import pytest
from core.agenda import Agenda
from core.config import SchedulerConfig
from exceptions.custom_errors import InvalidConfigError
from utils.constants import Specialty, Urgency


def test_default_tables(config):
    assert config.strict is True
    assert config.rank_of(Urgency.STAT) < config.rank_of(Urgency.URGENT) < config.rank_of(Urgency.ROUTINE)
    assert config.specialty_for("Complete Blood Count") == Specialty.BLOOD
    assert config.specialty_for("  complete blood count ") == Specialty.BLOOD
    assert config.specialty_for("Blood Culture") == Specialty.MICROBIOLOGY
    assert config.specialty_for("Unknown Assay") is None


def test_specialty_names_map_to_themselves(config):
    for specialty in Specialty:
        assert config.specialty_for(specialty.value.lower()) == specialty


def test_lenient_override(lenient_config):
    assert lenient_config.strict is False


def test_custom_tables():
    config = SchedulerConfig.build({"stat": 1, "urgent": 1, "routine": 5}, {"Sweat Test": "chemistry"}, strict=False)
    assert config.rank_of(Urgency.URGENT) == 1
    assert config.specialty_for("SWEAT TEST") == Specialty.CHEMISTRY


def test_unknown_urgency_is_rejected():
    with pytest.raises(InvalidConfigError):
        SchedulerConfig.build({"STAT": 1, "URGENT": 2, "ROUTINE": 3, "SOMEDAY": 4}, {})


def test_missing_urgency_rank_is_rejected():
    with pytest.raises(InvalidConfigError):
        SchedulerConfig.build({"STAT": 1}, {})


def test_unknown_specialty_is_rejected():
    with pytest.raises(InvalidConfigError) as exc:
        SchedulerConfig.build({"STAT": 1, "URGENT": 2, "ROUTINE": 3}, {"Sweat Test": "ALCHEMY"})
    assert "Sweat Test" in str(exc.value)


def test_agenda_defaults_and_commit():
    agenda = Agenda()
    assert agenda.technician_ready("R1", default=480) == 480
    assert agenda.equipment_ready("R1") == 0

    agenda.commit("R1", "R1", end=600, cleaning_time=15)
    assert agenda.technician_ready("R1", default=480) == 600
    assert agenda.equipment_ready("R1") == 615


def test_every_urgency_is_ranked_from_the_table():
    config = SchedulerConfig.build({"STAT": 4, "URGENT": 5, "ROUTINE": 6}, {})
    assert [config.rank_of(u) for u in Urgency] == [config.urgency_ranks[u] for u in Urgency]
    assert sorted(config.rank_of(u) for u in Urgency) == [4, 5, 6]
