"""Pydantic schemas for the eligibility engine's output.

Pure data classes — no DB dependencies. Built fresh on every call and
immutable once returned.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer, model_validator

from rules_engine.models.enums import DocumentCategory, RuleType


class IncomeTest(BaseModel):
    """Outcome of the gross or net income test."""

    model_config = ConfigDict(frozen=True)

    passed: bool
    limit: int                      # cents
    actual: int                     # cents
    bypassed_by: str | None = None  # "Elderly/Disabled Exemption" or a categorical rule name


class DeductionBreakdown(BaseModel):
    """The five deduction categories and their exact sum."""

    model_config = ConfigDict(frozen=True)

    standard_deduction: int = 0
    earned_income_deduction: int = 0
    dependent_care_deduction: int = 0
    medical_expense_deduction: int = 0
    shelter_deduction: int = 0
    total: int = 0

    @model_validator(mode="after")
    def check_total(self) -> DeductionBreakdown:
        parts = (
            self.standard_deduction
            + self.earned_income_deduction
            + self.dependent_care_deduction
            + self.medical_expense_deduction
            + self.shelter_deduction
        )
        if self.total != parts:
            msg = f"Deduction total {self.total} does not equal the sum of its categories ({parts})"
            raise ValueError(msg)
        return self


class PolicyCitation(BaseModel):
    """Reference tying a computed value to the policy text that authorizes it."""

    model_config = ConfigDict(frozen=True)

    section_number: str
    section_title: str
    rule_type: RuleType
    description: str


class RulesSnapshot(BaseModel):
    """Identifiers of the exact policy records that produced a result."""

    model_config = ConfigDict(frozen=True)

    effective_date: date
    income_limit_id: str
    allotment_id: str
    deduction_ids: list[str] = Field(default_factory=list)
    categorical_rule_id: str | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_categorical_rule(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.categorical_rule_id is None:
            data.pop("categorical_rule_id", None)
        return data


class EligibilityResult(BaseModel):
    """Full eligibility and benefit determination for one household."""

    model_config = ConfigDict(frozen=True)

    is_eligible: bool
    reason: str
    ineligibility_reasons: list[str] | None = None
    gross_income_test: IncomeTest
    net_income_test: IncomeTest
    deductions: DeductionBreakdown
    monthly_benefit: int            # cents
    max_allotment: int              # cents
    calculation_breakdown: list[str]
    rules_snapshot: RulesSnapshot
    policy_citations: list[PolicyCitation]

    @property
    def net_monthly_income(self) -> int:
        return self.net_income_test.actual


class DocumentChecklistItem(BaseModel):
    """One verification document the household should bring."""

    model_config = ConfigDict(frozen=True)

    category: DocumentCategory
    document_type: str
    required: bool
    acceptable_documents: list[str] = Field(default_factory=list)
    validity_days: int | None = None
    notes: str | None = None
