"""
core
----

Core scheduling engine components:

- SchedulerConfig:
  Urgency ranking and analysis-type to specialty table passed into each run.

- Agenda:
  Next-available minute for every technician and equipment unit.

- ScheduleState & Candidate:
  Encapsulate the inputs, bookkeeping and results of one scheduling run, and a
  proposed placement under evaluation.

- SlotRuleManager:
  Register and apply time-window rules to a candidate in a controlled sequence.

- DropReason:
  Catalogue of reasons a sample can end up without an assignment.
"""
