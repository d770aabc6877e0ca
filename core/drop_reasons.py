from dataclasses import dataclass


@dataclass(frozen=True)
class DropReason:
    code: str
    message: str


def define_drop_reasons() -> dict[str, DropReason]:
    return {
        "UNMAPPED_ANALYSIS_TYPE": DropReason(
            "UNMAPPED_ANALYSIS_TYPE",
            "Analysis type '{analysis_type}' has no specialty mapping."
        ),
        "NO_TECHNICIAN": DropReason(
            "NO_TECHNICIAN",
            "No technician holds specialty {specialty}."
        ),
        "NO_EQUIPMENT": DropReason(
            "NO_EQUIPMENT",
            "No equipment unit of type {specialty}."
        ),
        "NO_FEASIBLE_SLOT": DropReason(
            "NO_FEASIBLE_SLOT",
            "Every compatible technician would finish after the end of their shift."
        ),
    }


DROP_REASONS = define_drop_reasons()
