"""SQLAlchemy ORM models for the policy parameter store.

Import all models here so Alembic and Base.metadata.create_all() discover them.
"""

from __future__ import annotations

from rules_engine.models.base import Base
from rules_engine.models.calculation import EligibilityCalculation
from rules_engine.models.enums import (
    CategoricalCode,
    DeductionType,
    DocumentCategory,
    RuleType,
)
from rules_engine.models.policy import (
    AllotmentRecord,
    CategoricalEligibilityRecord,
    DeductionRecord,
    DocumentRequirementRecord,
    IncomeLimitRecord,
)

__all__ = [
    "Base",
    "AllotmentRecord",
    "CategoricalEligibilityRecord",
    "DeductionRecord",
    "DocumentRequirementRecord",
    "EligibilityCalculation",
    "IncomeLimitRecord",
    "CategoricalCode",
    "DeductionType",
    "DocumentCategory",
    "RuleType",
]
