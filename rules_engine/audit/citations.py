"""Policy citations — one per policy record that shaped a result.

Section numbers refer to the program manual the policy tables are
transcribed from.
"""

from __future__ import annotations

from rules_engine.models.enums import DeductionType, RuleType
from rules_engine.schemas.calculators import DeductionResult, ResolvedPolicy
from rules_engine.schemas.eligibility import DeductionBreakdown, PolicyCitation

INCOME_LIMIT_SECTION = ("409", "Income Eligibility")
CATEGORICAL_SECTION = ("115", "Categorical Eligibility")
ALLOTMENT_SECTION = ("600", "Standards for Income and Deductions")

DEDUCTION_SECTIONS: dict[DeductionType, tuple[str, str]] = {
    DeductionType.STANDARD: ("212", "Deductions"),
    DeductionType.EARNED_INCOME: ("213", "Determining Income Deductions"),
    DeductionType.DEPENDENT_CARE: ("212", "Deductions"),
    DeductionType.MEDICAL: ("212", "Deductions"),
    DeductionType.SHELTER: ("214", "Utility Allowances"),
}


def _deduction_amount(breakdown: DeductionBreakdown, deduction_type: DeductionType) -> int:
    return {
        DeductionType.STANDARD: breakdown.standard_deduction,
        DeductionType.EARNED_INCOME: breakdown.earned_income_deduction,
        DeductionType.DEPENDENT_CARE: breakdown.dependent_care_deduction,
        DeductionType.MEDICAL: breakdown.medical_expense_deduction,
        DeductionType.SHELTER: breakdown.shelter_deduction,
    }.get(deduction_type, 0)


def _deduction_description(deduction_type: DeductionType, program_name: str, percentage: int | None) -> str:
    if deduction_type == DeductionType.STANDARD:
        return f"Standard deduction for {program_name} households"
    if deduction_type == DeductionType.EARNED_INCOME:
        return f"{percentage}% earned income deduction"
    if deduction_type == DeductionType.DEPENDENT_CARE:
        return "Dependent care costs needed for work, training or education"
    if deduction_type == DeductionType.MEDICAL:
        return "Medical expenses over the threshold for elderly or disabled members"
    return "Shelter and utility cost deductions"


def categorical_description(rule_name: str, bypasses_gross_test: bool) -> str:
    """Consumers search this text for the phrase "categorical eligibility"."""
    if bypasses_gross_test:
        return f"{rule_name} categorical eligibility bypass of the gross income test"
    return f"{rule_name} categorical eligibility (gross income test still applies)"


def build_policy_citations(
    resolved: ResolvedPolicy,
    deductions: DeductionResult,
    *,
    jurisdiction: str,
    program_name: str,
) -> list[PolicyCitation]:
    """Cite the income limit, each deduction rule that contributed an amount,
    the categorical rule when one matched, and the allotment table."""
    section, title = INCOME_LIMIT_SECTION
    citations = [
        PolicyCitation(
            section_number=section,
            section_title=title,
            rule_type=RuleType.INCOME_LIMIT,
            description=f"{jurisdiction} {program_name} income limits for household size {resolved.household_size}",
        )
    ]

    for rule in deductions.rules_used:
        if _deduction_amount(deductions.breakdown, rule.deduction_type) <= 0:
            continue
        section, title = DEDUCTION_SECTIONS[rule.deduction_type]
        citations.append(
            PolicyCitation(
                section_number=section,
                section_title=title,
                rule_type=RuleType.DEDUCTION,
                description=_deduction_description(rule.deduction_type, program_name, rule.percentage),
            )
        )

    categorical = resolved.categorical_rule
    if categorical is not None:
        section, title = CATEGORICAL_SECTION
        citations.append(
            PolicyCitation(
                section_number=section,
                section_title=title,
                rule_type=RuleType.CATEGORICAL,
                description=categorical_description(categorical.rule_name, categorical.bypass_gross_income_test),
            )
        )

    section, title = ALLOTMENT_SECTION
    citations.append(
        PolicyCitation(
            section_number=section,
            section_title=title,
            rule_type=RuleType.ALLOTMENT,
            description=f"Maximum {program_name} allotment tables and benefit calculation",
        )
    )
    return citations
