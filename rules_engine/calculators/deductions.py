"""Deduction calculator — standard, earned income, dependent care, medical, shelter.

Pure Python, deterministic. Takes the household and the active deduction-rule
set and returns the five deduction amounts with their exact total.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rules_engine.calculators.money import format_cents, half_of, percent_of
from rules_engine.errors import ConfigurationError
from rules_engine.models.enums import DeductionType
from rules_engine.schemas.calculators import DeductionResult
from rules_engine.schemas.eligibility import DeductionBreakdown
from rules_engine.schemas.household import HouseholdInput
from rules_engine.schemas.policy import DeductionRule

logger = logging.getLogger(__name__)

# Order in which deductions are applied and reported
DEDUCTION_ORDER: tuple[DeductionType, ...] = (
    DeductionType.STANDARD,
    DeductionType.EARNED_INCOME,
    DeductionType.DEPENDENT_CARE,
    DeductionType.MEDICAL,
    DeductionType.SHELTER,
)


def _latest(candidates: list[DeductionRule]) -> DeductionRule:
    """Newest effective date wins, ties broken by lowest id."""
    return min(candidates, key=lambda r: (-r.effective_date.toordinal(), r.id))


def select_deduction_rules(rules: Iterable[DeductionRule]) -> dict[DeductionType, DeductionRule]:
    """Pick one rule per deduction type and check the set is usable.

    Raises:
        ConfigurationError: empty set, no standard rule, or a rule missing
            the parameter its type needs.
    """
    rules = list(rules)
    if not rules:
        raise ConfigurationError("Deduction rule set is empty")

    by_type: dict[DeductionType, list[DeductionRule]] = {}
    for rule in rules:
        if rule.deduction_type == DeductionType.UNKNOWN:
            logger.warning("Ignoring deduction rule %s with unrecognized type", rule.id)
            continue
        by_type.setdefault(rule.deduction_type, []).append(rule)

    selected: dict[DeductionType, DeductionRule] = {}
    for deduction_type in DEDUCTION_ORDER:
        candidates = by_type.get(deduction_type)
        if not candidates:
            continue
        if len(candidates) > 1:
            logger.warning(
                "%d active %s deduction rules; using the most recent",
                len(candidates),
                deduction_type.value,
            )
        selected[deduction_type] = _latest(candidates)

    standard = selected.get(DeductionType.STANDARD)
    if standard is None:
        raise ConfigurationError("Deduction rule set has no standard deduction")
    if standard.amount is None:
        raise ConfigurationError(f"Standard deduction rule {standard.id} has no amount")

    earned = selected.get(DeductionType.EARNED_INCOME)
    if earned is not None and earned.percentage is None:
        raise ConfigurationError(f"Earned income deduction rule {earned.id} has no percentage")

    return selected


def calculate_deductions(household: HouseholdInput, rules: Iterable[DeductionRule]) -> DeductionResult:
    """Compute every deduction category for a household.

    Args:
        household: Household facts (amounts in cents).
        rules: Active deduction rules for the program.

    Returns:
        DeductionResult with the breakdown, the rules selected per type,
        and one breakdown line per category.
    """
    selected = select_deduction_rules(rules)
    steps: list[str] = []
    elderly_or_disabled = household.is_elderly_or_disabled

    # Standard: unconditional
    standard = selected[DeductionType.STANDARD].amount or 0
    steps.append(f"Standard deduction: {format_cents(standard)}")

    # Earned income: percentage of earned income only
    earned = 0
    earned_rule = selected.get(DeductionType.EARNED_INCOME)
    if earned_rule is not None and household.earned_income > 0:
        pct = earned_rule.percentage or 0
        earned = percent_of(household.earned_income, pct)
        steps.append(
            f"Earned income deduction ({pct}% of {format_cents(household.earned_income)}): {format_cents(earned)}"
        )
    else:
        steps.append(f"Earned income deduction: {format_cents(0)}")

    # Dependent care: pass-through, capped when the rule has a cap
    dependent_care = 0
    care_expenses = household.dependent_care_expenses or 0
    if care_expenses > 0:
        care_rule = selected.get(DeductionType.DEPENDENT_CARE)
        care_cap = care_rule.max_amount if care_rule is not None else None
        dependent_care = min(care_expenses, care_cap) if care_cap is not None else care_expenses
    steps.append(f"Dependent care deduction: {format_cents(dependent_care)}")

    # Medical: elderly/disabled only, amount over the threshold
    medical = 0
    medical_expenses = household.medical_expenses or 0
    if elderly_or_disabled and medical_expenses > 0:
        medical_rule = selected.get(DeductionType.MEDICAL)
        threshold = (medical_rule.min_amount or 0) if medical_rule is not None else 0
        medical = max(0, medical_expenses - threshold)
        steps.append(
            f"Medical expense deduction (amount over {format_cents(threshold)}): {format_cents(medical)}"
        )
    else:
        steps.append(f"Medical expense deduction: {format_cents(0)}")

    # Shelter: excess over half of income after the other deductions
    shelter = 0
    shelter_costs = household.shelter_costs or 0
    if shelter_costs > 0:
        income_after_other = household.gross_monthly_income - (standard + earned + dependent_care + medical)
        excess = max(0, shelter_costs - half_of(income_after_other))
        shelter_rule = selected.get(DeductionType.SHELTER)
        shelter_cap = shelter_rule.max_amount if shelter_rule is not None else None
        if shelter_cap is not None and not elderly_or_disabled:
            shelter = min(excess, shelter_cap)
            steps.append(f"Shelter deduction (capped at {format_cents(shelter_cap)}): {format_cents(shelter)}")
        else:
            shelter = excess
            steps.append(f"Shelter deduction (uncapped): {format_cents(shelter)}")
    else:
        steps.append(f"Shelter deduction: {format_cents(0)}")

    total = standard + earned + dependent_care + medical + shelter
    steps.append(f"Total deductions: {format_cents(total)}")

    breakdown = DeductionBreakdown(
        standard_deduction=standard,
        earned_income_deduction=earned,
        dependent_care_deduction=dependent_care,
        medical_expense_deduction=medical,
        shelter_deduction=shelter,
        total=total,
    )
    return DeductionResult(
        breakdown=breakdown,
        rules_used=[selected[t] for t in DEDUCTION_ORDER if t in selected],
        steps=steps,
    )
