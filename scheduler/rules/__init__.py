"""
scheduler.rules
---------------

Exposes all scheduling rules by importing from:

- `priority`: Processing order of samples (urgency class, then arrival time).
- `matching`: Analysis-type to specialty lookup and compatible technician / equipment selection.
- `slots`: Earliest feasible start under shift, lunch break and maintenance windows.
- `selection`: Choice among candidate technicians and commitment to the agenda.

Allows unified access to all rule definitions via wildcard imports.
"""
from .priority import *
from .matching import *
from .slots import *
from .selection import *
