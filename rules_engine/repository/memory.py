"""In-memory policy repository, loaded from a PolicySnapshot.

Used by the CLI (policy JSON exports) and tests. Applies the same
active/effective-date filtering as the SQL repository.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any, TypeVar

from rules_engine.models.enums import CategoricalCode
from rules_engine.schemas.policy import (
    Allotment,
    CategoricalEligibilityRule,
    DeductionRule,
    DocumentRequirementRule,
    IncomeLimit,
    PolicyRecord,
    PolicySnapshot,
)

R = TypeVar("R", bound=PolicyRecord)


def _active(records: Iterable[R], benefit_program_id: str, as_of: date) -> list[R]:
    """Active records for a program, newest effective date first, ties by id."""
    matching = [r for r in records if r.benefit_program_id == benefit_program_id and r.is_active_on(as_of)]
    return sorted(matching, key=lambda r: (-r.effective_date.toordinal(), r.id))


class InMemoryPolicyRepository:
    """PolicyRepository backed by lists of pydantic records."""

    def __init__(self, snapshot: PolicySnapshot | None = None) -> None:
        self.snapshot = snapshot or PolicySnapshot()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InMemoryPolicyRepository:
        return cls(PolicySnapshot.model_validate(data))

    @classmethod
    def from_json_file(cls, path: Path) -> InMemoryPolicyRepository:
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))

    async def get_active_income_limit(
        self, benefit_program_id: str, household_size: int, as_of: date
    ) -> IncomeLimit | None:
        candidates = [r for r in self.snapshot.income_limits if r.household_size == household_size]
        active = _active(candidates, benefit_program_id, as_of)
        return active[0] if active else None

    async def get_active_deductions(self, benefit_program_id: str, as_of: date) -> list[DeductionRule]:
        active = _active(self.snapshot.deductions, benefit_program_id, as_of)
        return sorted(active, key=lambda r: r.deduction_type.value)

    async def get_active_allotment(
        self, benefit_program_id: str, household_size: int, as_of: date
    ) -> Allotment | None:
        candidates = [r for r in self.snapshot.allotments if r.household_size == household_size]
        active = _active(candidates, benefit_program_id, as_of)
        return active[0] if active else None

    async def get_categorical_rule(
        self, benefit_program_id: str, code: CategoricalCode, as_of: date
    ) -> CategoricalEligibilityRule | None:
        candidates = [r for r in self.snapshot.categorical_rules if r.rule_code == code]
        active = _active(candidates, benefit_program_id, as_of)
        return active[0] if active else None

    async def get_document_requirements(
        self, benefit_program_id: str, as_of: date
    ) -> list[DocumentRequirementRule]:
        active = _active(self.snapshot.document_requirements, benefit_program_id, as_of)
        return sorted(active, key=lambda r: (r.document_type.value, r.requirement_name))
