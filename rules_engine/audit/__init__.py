"""Audit & explainability — policy citations, rules snapshot, breakdown."""

from rules_engine.audit.builder import build_audit_trail, build_rules_snapshot
from rules_engine.audit.citations import build_policy_citations

__all__ = [
    "build_audit_trail",
    "build_rules_snapshot",
    "build_policy_citations",
]
