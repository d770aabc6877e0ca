from typing import Dict


class Agenda:
    """
    Next-available minute per resource.

    Technicians and equipment are kept in separate tables so an equipment unit that
    happens to share an id with a technician never shadows it. A resource with no
    entry has no prior commitment; the caller decides its default readiness.
    """

    def __init__(self):
        self.technicians: Dict[str, int] = {}
        self.equipment: Dict[str, int] = {}

    def technician_ready(self, technician_id: str, default: int) -> int:
        ready = self.technicians.get(technician_id)
        return default if ready is None else ready

    def equipment_ready(self, equipment_id: str, default: int = 0) -> int:
        ready = self.equipment.get(equipment_id)
        return default if ready is None else ready

    def commit(self, technician_id: str, equipment_id: str, end: int, cleaning_time: int):
        """Record one assignment: the technician is free at `end`, the unit after cleaning."""
        self.technicians[technician_id] = end
        self.equipment[equipment_id] = end + cleaning_time

    def __repr__(self) -> str:
        return f"Agenda(technicians={self.technicians!r}, equipment={self.equipment!r})"
