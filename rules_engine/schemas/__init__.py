"""Pydantic schemas — household input, policy records, engine results."""

from rules_engine.schemas.eligibility import (
    DeductionBreakdown,
    DocumentChecklistItem,
    EligibilityResult,
    IncomeTest,
    PolicyCitation,
    RulesSnapshot,
)
from rules_engine.schemas.household import HouseholdInput
from rules_engine.schemas.policy import (
    Allotment,
    CategoricalEligibilityRule,
    DeductionRule,
    DocumentRequirementRule,
    IncomeLimit,
    PolicySnapshot,
)

__all__ = [
    "HouseholdInput",
    "IncomeLimit",
    "DeductionRule",
    "Allotment",
    "CategoricalEligibilityRule",
    "DocumentRequirementRule",
    "PolicySnapshot",
    "IncomeTest",
    "DeductionBreakdown",
    "PolicyCitation",
    "RulesSnapshot",
    "EligibilityResult",
    "DocumentChecklistItem",
]
