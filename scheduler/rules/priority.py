from typing import Iterable, List
from core.config import SchedulerConfig
from schemas.schedule.generate import Sample
from utils.time_utils import to_minutes

"""
This module contains the priority ordering rule for the lab scheduling problem.
"""


def sort_samples(samples: Iterable[Sample], config: SchedulerConfig) -> List[Sample]:
    """
    Return a new list of samples in processing order.

    Samples are ordered by urgency rank (STAT first), then by arrival time. Python's sort is
    stable, so samples with the same urgency and arrival keep their input order. The caller's
    sequence is left untouched.
    """
    return sorted(
        samples,
        key=lambda s: (config.rank_of(s.priority), to_minutes(s.arrivalTime)),
    )
