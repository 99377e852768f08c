"""Eligibility engine — SNAP-style eligibility and benefit determination."""

from rules_engine.eligibility.checklist import build_document_checklist
from rules_engine.eligibility.engine import EligibilityEngine, coerce_household

__all__ = [
    "EligibilityEngine",
    "build_document_checklist",
    "coerce_household",
]
