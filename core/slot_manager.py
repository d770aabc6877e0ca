from typing import Callable, Optional
from core.state import Candidate, ScheduleState

SlotRule = Callable[[Candidate, ScheduleState], Optional[Candidate]]


class SlotRuleManager:
    def __init__(self, state: ScheduleState):
        self.state = state
        self.rules: list[SlotRule] = []

    def add_rule(self, rule_func: SlotRule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self, candidate: Candidate) -> Optional[Candidate]:
        """Apply all registered rules in order; stop as soon as one rejects the candidate."""
        for rule in self.rules:
            candidate = rule(candidate, self.state)
            if candidate is None:
                return None
        return candidate
