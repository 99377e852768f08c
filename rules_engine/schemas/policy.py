"""Pydantic views of policy parameter records.

These are what the repository hands to the engine. They are built from ORM
rows (from_attributes) or from plain JSON-compatible dicts.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rules_engine.models.enums import CategoricalCode, DeductionType, DocumentCategory


class PolicyRecord(BaseModel):
    """Fields shared by every effective-dated policy record."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    benefit_program_id: str
    effective_date: date
    end_date: date | None = None
    is_active: bool = True

    def is_active_on(self, as_of: date) -> bool:
        """Active flag set and as_of inside [effective_date, end_date]."""
        if not self.is_active or self.effective_date > as_of:
            return False
        return self.end_date is None or self.end_date >= as_of


class IncomeLimit(PolicyRecord):
    household_size: int = Field(ge=1)
    gross_monthly_limit: int = Field(ge=0)
    net_monthly_limit: int = Field(ge=0)
    percent_of_poverty: int = Field(ge=0)


class DeductionRule(PolicyRecord):
    """A deduction rule. Which of amount/percentage/min/max matter depends on the type."""

    deduction_type: DeductionType
    deduction_name: str = ""
    calculation_type: str | None = None
    amount: int | None = Field(default=None, ge=0)
    percentage: int | None = Field(default=None, ge=0, le=100)
    min_amount: int | None = Field(default=None, ge=0)
    max_amount: int | None = Field(default=None, ge=0)

    @field_validator("deduction_type", mode="before")
    @classmethod
    def parse_deduction_type(cls, v: object) -> DeductionType:
        return DeductionType.parse(v)


class Allotment(PolicyRecord):
    household_size: int = Field(ge=1)
    max_monthly_benefit: int = Field(ge=0)
    min_monthly_benefit: int | None = Field(default=None, ge=0)


class CategoricalEligibilityRule(PolicyRecord):
    """Categorical eligibility rule.

    bypass_net_income_test and bypass_asset_test are carried for the record
    but never change an outcome in this engine.
    """

    rule_name: str
    rule_code: CategoricalCode
    description: str | None = None
    bypass_gross_income_test: bool = False
    bypass_net_income_test: bool = False
    bypass_asset_test: bool = False

    @field_validator("rule_code", mode="before")
    @classmethod
    def parse_rule_code(cls, v: object) -> CategoricalCode:
        return CategoricalCode.parse(v)


class DocumentRequirementRule(PolicyRecord):
    requirement_name: str
    document_type: DocumentCategory = DocumentCategory.OTHER
    required_when: dict[str, Any] = Field(default_factory=dict)
    acceptable_documents: list[str] = Field(default_factory=list)
    validity_period: int | None = None   # days
    is_required: bool = True
    notes: str | None = None

    @field_validator("document_type", mode="before")
    @classmethod
    def parse_document_type(cls, v: object) -> object:
        valid = {c.value for c in DocumentCategory}
        return v if v in valid or isinstance(v, DocumentCategory) else DocumentCategory.OTHER


class PolicySnapshot(BaseModel):
    """A full set of policy records, as loaded from a JSON export."""

    income_limits: list[IncomeLimit] = Field(default_factory=list)
    deductions: list[DeductionRule] = Field(default_factory=list)
    allotments: list[Allotment] = Field(default_factory=list)
    categorical_rules: list[CategoricalEligibilityRule] = Field(default_factory=list)
    document_requirements: list[DocumentRequirementRule] = Field(default_factory=list)
