"""Audit trail assembly — citations, rules snapshot, calculation breakdown.

Built for every calculation regardless of the eligibility outcome.
"""

from __future__ import annotations

from collections.abc import Iterable

from rules_engine.audit.citations import build_policy_citations
from rules_engine.schemas.calculators import AuditTrail, DeductionResult, ResolvedPolicy
from rules_engine.schemas.eligibility import RulesSnapshot


def build_rules_snapshot(resolved: ResolvedPolicy, deductions: DeductionResult) -> RulesSnapshot:
    """Record ids of the exact policy records consulted."""
    return RulesSnapshot(
        effective_date=resolved.as_of,
        income_limit_id=resolved.income_limit.id,
        allotment_id=resolved.allotment.id,
        deduction_ids=[rule.id for rule in deductions.rules_used],
        categorical_rule_id=resolved.categorical_rule.id if resolved.categorical_rule else None,
    )


def build_audit_trail(
    resolved: ResolvedPolicy,
    deductions: DeductionResult,
    breakdown_steps: Iterable[str],
    *,
    jurisdiction: str,
    program_name: str,
) -> AuditTrail:
    """Stitch the audit artifacts for one calculation."""
    return AuditTrail(
        policy_citations=build_policy_citations(
            resolved,
            deductions,
            jurisdiction=jurisdiction,
            program_name=program_name,
        ),
        rules_snapshot=build_rules_snapshot(resolved, deductions),
        calculation_breakdown=list(breakdown_steps),
    )
