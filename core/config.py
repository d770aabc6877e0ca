from dataclasses import dataclass
from typing import Dict, Mapping, Optional
from exceptions.custom_errors import InvalidConfigError
from utils.constants import (
    ANALYSIS_SPECIALTIES,
    STRICT_ANALYSIS_MAPPING,
    URGENCY_RANKS,
    Specialty,
    Urgency,
)


def normalize_analysis_type(label: str) -> str:
    """Lookup key for an analysis-type label: trimmed and upper-cased."""
    return str(label).strip().upper()


@dataclass(frozen=True)
class SchedulerConfig:
    """
    The lookup tables a scheduling run depends on.

    Passed explicitly into the scheduler so that tests and callers can swap the
    urgency ranking or the analysis-type table without touching module state.
    """

    urgency_ranks: Dict[Urgency, int]
    """Processing rank per urgency class; lower ranks are scheduled first."""
    analysis_specialties: Dict[str, Specialty]
    """Normalised analysis-type label -> required specialty."""
    strict: bool = True
    """If True, an unmapped analysis type aborts the batch before any assignment."""

    def __post_init__(self):
        missing = [u.value for u in Urgency if u not in self.urgency_ranks]
        if missing:
            raise InvalidConfigError(f"Urgency ranks missing for: {', '.join(missing)}")

    @classmethod
    def build(
        cls,
        urgency_ranks: Mapping[str, int],
        analysis_specialties: Mapping[str, str],
        strict: bool = True,
    ) -> "SchedulerConfig":
        """Validate raw (JSON-style) tables and build a typed config."""
        try:
            ranks = {Urgency(str(k).strip().upper()): int(v) for k, v in urgency_ranks.items()}
        except ValueError as e:
            raise InvalidConfigError(f"Invalid urgency rank table: {e}")

        table: Dict[str, Specialty] = {s.value: s for s in Specialty}
        unknown = []
        for label, specialty in analysis_specialties.items():
            try:
                table[normalize_analysis_type(label)] = Specialty(str(specialty).strip().upper())
            except ValueError:
                unknown.append(f"{label} -> {specialty}")
        if unknown:
            raise InvalidConfigError(
                "Analysis types mapped to unknown specialties: " + ", ".join(unknown)
            )
        return cls(urgency_ranks=ranks, analysis_specialties=table, strict=strict)

    @classmethod
    def from_constants(cls, strict: Optional[bool] = None) -> "SchedulerConfig":
        """Build the default config from config/constants.json."""
        return cls.build(
            URGENCY_RANKS,
            ANALYSIS_SPECIALTIES,
            strict=STRICT_ANALYSIS_MAPPING if strict is None else strict,
        )

    def rank_of(self, urgency: Urgency) -> int:
        return self.urgency_ranks[urgency]

    def specialty_for(self, analysis_type: str) -> Optional[Specialty]:
        return self.analysis_specialties.get(normalize_analysis_type(analysis_type))
