"""
scheduler
---------

Main scheduling module. Initializes key components:

- `builder`: Entry point that validates a batch and assembles the schedule.
- `setup`: Preparation of the run state (time windows, processing order).
- `solver`: The per-sample greedy assignment loop.
- `extractor`: Metrics and tabular views of the result.

Provides high-level access to core scheduling functionality.
"""
from . import builder, extractor
