"""Domain enums used across SQLAlchemy models and Pydantic schemas.

All enums use str mixin for JSON serialization. Codes that arrive as free
text (deduction types, categorical codes) resolve to an explicit UNKNOWN
member instead of failing lookups silently.
"""

from __future__ import annotations

from enum import Enum


class DeductionType(str, Enum):
    """Deduction categories applied between gross and net income."""

    STANDARD = "standard"
    EARNED_INCOME = "earned_income"
    DEPENDENT_CARE = "dependent_care"
    MEDICAL = "medical"
    SHELTER = "shelter"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> DeductionType:
        """Map a stored code to a member, UNKNOWN when unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN


class CategoricalCode(str, Enum):
    """Programs whose participation can confer categorical eligibility."""

    SSI = "SSI"
    TANF = "TANF"
    GA = "GA"
    BBCE = "BBCE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: object) -> CategoricalCode:
        """Map a caller-supplied code to a member, UNKNOWN when unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.UNKNOWN


class RuleType(str, Enum):
    """Kind of policy record a citation points at."""

    INCOME_LIMIT = "income_limit"
    DEDUCTION = "deduction"
    ALLOTMENT = "allotment"
    CATEGORICAL = "categorical"


class DocumentCategory(str, Enum):
    """Document requirement grouping for the verification checklist."""

    INCOME = "income"
    IDENTITY = "identity"
    RESIDENCY = "residency"
    EXPENSES = "expenses"
    OTHER = "other"
