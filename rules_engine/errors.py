"""Error taxonomy for the rules engine.

Every error here is fatal for the calculation that raised it: no partial
EligibilityResult is ever returned. Soft conditions (unmatched categorical
code, zero income, absent optional expenses) are not errors.
"""

from __future__ import annotations


class RulesEngineError(Exception):
    """Base class for all engine errors."""


class PolicyNotFoundError(RulesEngineError):
    """No active income limit or allotment for the program/size/date."""

    def __init__(self, record_type: str, benefit_program_id: str, household_size: int, as_of: object) -> None:
        self.record_type = record_type
        self.benefit_program_id = benefit_program_id
        self.household_size = household_size
        self.as_of = as_of
        super().__init__(
            f"No active {record_type} found for program {benefit_program_id}, "
            f"household size {household_size}, as of {as_of}"
        )


class ConfigurationError(RulesEngineError):
    """The active deduction-rule set is malformed."""


class ValidationError(RulesEngineError, ValueError):
    """Household input violates a structural precondition."""
