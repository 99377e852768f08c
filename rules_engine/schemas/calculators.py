"""Intermediate results passed between the calculators and the audit builder.

Every result carries the plain-text steps it contributes to the
calculation breakdown, in order.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from rules_engine.schemas.eligibility import DeductionBreakdown, IncomeTest, PolicyCitation, RulesSnapshot
from rules_engine.schemas.policy import Allotment, CategoricalEligibilityRule, DeductionRule, IncomeLimit


class DeductionResult(BaseModel):
    """Deduction breakdown plus the rules that produced it."""

    model_config = ConfigDict(frozen=True)

    breakdown: DeductionBreakdown
    rules_used: list[DeductionRule] = Field(default_factory=list)  # one per type, in type order
    steps: list[str] = Field(default_factory=list)


class IncomeTestResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_test: IncomeTest
    net_test: IncomeTest
    is_eligible: bool
    ineligibility_reasons: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)


class BenefitResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_benefit: int
    minimum_applied: bool = False
    steps: list[str] = Field(default_factory=list)


class ResolvedPolicy(BaseModel):
    """Every policy record fetched for one calculation, all as of the same date."""

    model_config = ConfigDict(frozen=True)

    benefit_program_id: str
    household_size: int
    as_of: date
    income_limit: IncomeLimit
    allotment: Allotment
    deductions: list[DeductionRule] = Field(default_factory=list)
    categorical_rule: CategoricalEligibilityRule | None = None


class AuditTrail(BaseModel):
    model_config = ConfigDict(frozen=True)

    policy_citations: list[PolicyCitation]
    rules_snapshot: RulesSnapshot
    calculation_breakdown: list[str]
