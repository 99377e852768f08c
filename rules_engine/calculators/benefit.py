"""Monthly benefit amount from net income and the household's allotment."""

from __future__ import annotations

from rules_engine.calculators.money import format_cents, percent_of
from rules_engine.schemas.calculators import BenefitResult
from rules_engine.schemas.household import HouseholdInput

# Expected household contribution toward food, as a share of net income
BENEFIT_REDUCTION_PERCENT = 30

# Household sizes eligible for the minimum benefit floor
MINIMUM_BENEFIT_MAX_SIZE = 2


def calculate_benefit(
    net_income: int,
    max_allotment: int,
    min_allotment: int | None,
    household: HouseholdInput,
    is_eligible: bool,
) -> BenefitResult:
    """Compute the monthly benefit in cents.

    - Ineligible → 0.
    - Zero net income → the full max allotment.
    - Otherwise max_allotment − floor(30% of net income), clamped at 0.
    - A positive benefit for a 1–2 person elderly/disabled household is
      raised to min_allotment when one is defined. A $0 benefit stays $0.
    """
    if not is_eligible:
        return BenefitResult(monthly_benefit=0)

    steps: list[str] = []
    if net_income == 0:
        benefit = max_allotment
        steps.append(f"Benefit calculation: no net income, maximum allotment {format_cents(max_allotment)}")
    else:
        reduction = percent_of(net_income, BENEFIT_REDUCTION_PERCENT)
        benefit = max(0, max_allotment - reduction)
        steps.append(
            f"Benefit calculation: {format_cents(max_allotment)} - "
            f"({BENEFIT_REDUCTION_PERCENT}% × {format_cents(net_income)} = {format_cents(reduction)}) "
            f"= {format_cents(benefit)}"
        )

    minimum_applied = False
    if (
        benefit > 0
        and min_allotment is not None
        and benefit < min_allotment
        and household.size <= MINIMUM_BENEFIT_MAX_SIZE
        and household.is_elderly_or_disabled
    ):
        benefit = min(min_allotment, max_allotment)
        minimum_applied = True
        steps.append(
            f"Minimum benefit applied (1-2 person household with elderly/disabled): {format_cents(benefit)}"
        )

    steps.append(f"Monthly benefit: {format_cents(benefit)}")
    return BenefitResult(monthly_benefit=benefit, minimum_applied=minimum_applied, steps=steps)
