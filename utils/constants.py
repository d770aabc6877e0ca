import json
from enum import Enum
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.

The closed vocabularies used by the lab batches (urgency classes, specialties, sample media)
are defined here as enums so that schemas and config share one definition.
"""


class Urgency(str, Enum):
    STAT = "STAT"
    URGENT = "URGENT"
    ROUTINE = "ROUTINE"


class Specialty(str, Enum):
    BLOOD = "BLOOD"
    CHEMISTRY = "CHEMISTRY"
    MICROBIOLOGY = "MICROBIOLOGY"
    IMMUNOLOGY = "IMMUNOLOGY"
    GENETICS = "GENETICS"


class SampleType(str, Enum):
    BLOOD = "BLOOD"
    URINE = "URINE"
    TISSUE = "TISSUE"


with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
URGENCY_RANKS = _constants["URGENCY_RANKS"]
ANALYSIS_SPECIALTIES = _constants["ANALYSIS_SPECIALTIES"]
STRICT_ANALYSIS_MAPPING = _constants.get("STRICT_ANALYSIS_MAPPING", True)

CLOCK_FORMAT = "%02d:%02d"
MINUTES_PER_DAY = 24 * 60
