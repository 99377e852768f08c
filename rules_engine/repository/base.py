"""Policy parameter repository interface.

The engine depends on this protocol only. Implementations return at most one
logically-current record per key for the given as_of date.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from rules_engine.models.enums import CategoricalCode
from rules_engine.schemas.policy import (
    Allotment,
    CategoricalEligibilityRule,
    DeductionRule,
    DocumentRequirementRule,
    IncomeLimit,
)


class PolicyRepository(Protocol):
    """Reads of active policy records, all keyed by an explicit as_of date."""

    async def get_active_income_limit(
        self, benefit_program_id: str, household_size: int, as_of: date
    ) -> IncomeLimit | None: ...

    async def get_active_deductions(self, benefit_program_id: str, as_of: date) -> list[DeductionRule]: ...

    async def get_active_allotment(
        self, benefit_program_id: str, household_size: int, as_of: date
    ) -> Allotment | None: ...

    async def get_categorical_rule(
        self, benefit_program_id: str, code: CategoricalCode, as_of: date
    ) -> CategoricalEligibilityRule | None: ...

    async def get_document_requirements(
        self, benefit_program_id: str, as_of: date
    ) -> list[DocumentRequirementRule]: ...
