"""Benefit eligibility & amount calculation engine.

Deterministic SNAP-style determinations against effective-dated policy
records, with policy citations and a rules snapshot for every result.
"""

from rules_engine.eligibility import EligibilityEngine
from rules_engine.errors import ConfigurationError, PolicyNotFoundError, RulesEngineError, ValidationError
from rules_engine.schemas import EligibilityResult, HouseholdInput

__all__ = [
    "EligibilityEngine",
    "EligibilityResult",
    "HouseholdInput",
    "RulesEngineError",
    "PolicyNotFoundError",
    "ConfigurationError",
    "ValidationError",
]
