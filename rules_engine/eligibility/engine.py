"""Eligibility engine — public entry point for benefit determinations.

Sequence for one call:
    ResolvePolicy → ComputeDeductions → EvaluateGrossTest → EvaluateNetTest
    → ComputeBenefit → BuildAudit

All policy lookups for a call use one as_of date. No state is shared between
calls; the repository is the only I/O.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

import pydantic

from rules_engine.audit import build_audit_trail
from rules_engine.calculators import (
    calculate_benefit,
    calculate_deductions,
    calculate_net_income,
    evaluate_income_tests,
    format_cents,
)
from rules_engine.config import EngineSettings, settings
from rules_engine.eligibility.checklist import build_document_checklist
from rules_engine.errors import PolicyNotFoundError, ValidationError
from rules_engine.models.enums import CategoricalCode
from rules_engine.repository.base import PolicyRepository
from rules_engine.schemas.calculators import ResolvedPolicy
from rules_engine.schemas.eligibility import DocumentChecklistItem, EligibilityResult
from rules_engine.schemas.household import HouseholdInput

logger = logging.getLogger(__name__)


def coerce_household(household: HouseholdInput | Mapping[str, Any]) -> HouseholdInput:
    """Accept a HouseholdInput or raw mapping; raise ValidationError on bad input."""
    if isinstance(household, HouseholdInput):
        return household
    if not isinstance(household, Mapping):
        raise ValidationError(f"Invalid household input: expected an object, got {type(household).__name__}")
    try:
        return HouseholdInput.model_validate(dict(household))
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid household input: {exc}") from exc


class EligibilityEngine:
    """Determines eligibility and monthly benefit against versioned policy records.

    Usage:
        engine = EligibilityEngine(SqlPolicyRepository(db))
        result = await engine.calculate_eligibility("md-snap", household)
    """

    def __init__(
        self,
        repository: PolicyRepository,
        engine_settings: EngineSettings | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.repository = repository
        self.settings = engine_settings or settings.engine
        self._today = today or date.today

    # ── Public API ───────────────────────────────────────────────────

    async def calculate_eligibility(
        self,
        benefit_program_id: str,
        household: HouseholdInput | Mapping[str, Any],
        as_of: date | None = None,
    ) -> EligibilityResult:
        """Calculate eligibility and benefit for a household.

        Raises:
            ValidationError: household input is structurally invalid (before any read).
            PolicyNotFoundError: no active income limit or allotment.
            ConfigurationError: the active deduction-rule set is malformed.
            TimeoutError: the calculation exceeded the configured bound.
        """
        household = coerce_household(household)
        as_of = as_of or self._today()
        return await asyncio.wait_for(
            self._calculate(benefit_program_id, household, as_of),
            timeout=self.settings.calculation_timeout_seconds,
        )

    async def get_document_checklist(
        self,
        benefit_program_id: str,
        household: HouseholdInput | Mapping[str, Any],
        as_of: date | None = None,
    ) -> list[DocumentChecklistItem]:
        """Verification documents the household should provide."""
        household = coerce_household(household)
        as_of = as_of or self._today()
        requirements = await self.repository.get_document_requirements(benefit_program_id, as_of)
        return build_document_checklist(household, requirements)

    # ── Steps ────────────────────────────────────────────────────────

    async def _resolve_policy(
        self, benefit_program_id: str, household: HouseholdInput, as_of: date
    ) -> ResolvedPolicy:
        size = household.size
        income_limit = await self.repository.get_active_income_limit(benefit_program_id, size, as_of)
        if income_limit is None:
            raise PolicyNotFoundError("income limit", benefit_program_id, size, as_of)

        deductions = await self.repository.get_active_deductions(benefit_program_id, as_of)

        allotment = await self.repository.get_active_allotment(benefit_program_id, size, as_of)
        if allotment is None:
            raise PolicyNotFoundError("allotment", benefit_program_id, size, as_of)

        categorical_rule = None
        code = household.categorical_eligibility
        if code is not None and code != CategoricalCode.UNKNOWN:
            categorical_rule = await self.repository.get_categorical_rule(benefit_program_id, code, as_of)
            if categorical_rule is not None and categorical_rule.bypass_net_income_test:
                logger.debug("Categorical rule %s sets bypass_net_income_test; not applied", categorical_rule.id)

        return ResolvedPolicy(
            benefit_program_id=benefit_program_id,
            household_size=size,
            as_of=as_of,
            income_limit=income_limit,
            allotment=allotment,
            deductions=deductions,
            categorical_rule=categorical_rule,
        )

    async def _calculate(self, benefit_program_id: str, household: HouseholdInput, as_of: date) -> EligibilityResult:
        logger.info(
            "Calculating eligibility for program %s (household size %d, as of %s)",
            benefit_program_id,
            household.size,
            as_of,
        )
        resolved = await self._resolve_policy(benefit_program_id, household, as_of)

        steps = [
            f"Household size: {household.size}",
            f"Gross monthly income: {format_cents(household.gross_monthly_income)}",
        ]
        code = household.categorical_eligibility
        if resolved.categorical_rule is not None:
            steps.append(f"Categorical eligibility: {resolved.categorical_rule.rule_name}")
        elif code == CategoricalCode.UNKNOWN:
            steps.append("Categorical eligibility code not recognized; no categorical rule applied")
        elif code is not None:
            steps.append(f"No active categorical eligibility rule for {code.value}")

        deductions = calculate_deductions(household, resolved.deductions)
        steps.extend(deductions.steps)

        net_income = calculate_net_income(household.gross_monthly_income, deductions.breakdown.total)
        steps.append(f"Net monthly income: {format_cents(net_income)}")

        tests = evaluate_income_tests(household, resolved.income_limit, resolved.categorical_rule, net_income)
        steps.extend(tests.steps)

        benefit = calculate_benefit(
            net_income,
            resolved.allotment.max_monthly_benefit,
            resolved.allotment.min_monthly_benefit,
            household,
            tests.is_eligible,
        )
        if tests.is_eligible:
            steps.extend(benefit.steps)
        else:
            steps.append(f"✗ Not eligible; monthly benefit {format_cents(0)}")

        audit = build_audit_trail(
            resolved,
            deductions,
            steps,
            jurisdiction=self.settings.jurisdiction,
            program_name=self.settings.program_name,
        )

        if tests.is_eligible:
            reason = f"Eligible for {format_cents(benefit.monthly_benefit)}/month in {self.settings.program_name} benefits"
        else:
            reason = "; ".join(tests.ineligibility_reasons)

        logger.info(
            "Eligibility for program %s: eligible=%s benefit=%d",
            benefit_program_id,
            tests.is_eligible,
            benefit.monthly_benefit,
        )
        return EligibilityResult(
            is_eligible=tests.is_eligible,
            reason=reason,
            ineligibility_reasons=None if tests.is_eligible else list(tests.ineligibility_reasons),
            gross_income_test=tests.gross_test,
            net_income_test=tests.net_test,
            deductions=deductions.breakdown,
            monthly_benefit=benefit.monthly_benefit,
            max_allotment=resolved.allotment.max_monthly_benefit,
            calculation_breakdown=audit.calculation_breakdown,
            rules_snapshot=audit.rules_snapshot,
            policy_citations=audit.policy_citations,
        )
