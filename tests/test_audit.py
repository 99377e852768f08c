"""Tests for policy citations and the rules snapshot."""

from __future__ import annotations

from datetime import date

from rules_engine.audit import build_audit_trail, build_policy_citations, build_rules_snapshot
from rules_engine.audit.citations import categorical_description
from rules_engine.calculators.deductions import calculate_deductions
from rules_engine.models.enums import RuleType
from rules_engine.schemas.calculators import ResolvedPolicy
from rules_engine.schemas.household import HouseholdInput

from .conftest import build_snapshot


def _resolved(size: int = 1, categorical_code: str | None = None) -> ResolvedPolicy:
    snapshot = build_snapshot()
    categorical = None
    if categorical_code is not None:
        categorical = next(r for r in snapshot.categorical_rules if r.rule_code.value == categorical_code)
    return ResolvedPolicy(
        benefit_program_id="md-snap",
        household_size=size,
        as_of=date(2025, 1, 15),
        income_limit=next(r for r in snapshot.income_limits if r.household_size == size),
        allotment=next(r for r in snapshot.allotments if r.household_size == size),
        deductions=snapshot.deductions,
        categorical_rule=categorical,
    )


def _cite(household: HouseholdInput, resolved: ResolvedPolicy):
    deductions = calculate_deductions(household, resolved.deductions)
    return build_policy_citations(resolved, deductions, jurisdiction="Maryland", program_name="SNAP")


class TestPolicyCitations:
    def test_income_limit_first_allotment_last(self) -> None:
        citations = _cite(HouseholdInput(size=1, gross_monthly_income=0), _resolved())
        assert citations[0].rule_type == RuleType.INCOME_LIMIT
        assert citations[0].description == "Maryland SNAP income limits for household size 1"
        assert citations[-1].rule_type == RuleType.ALLOTMENT
        assert citations[-1].section_number == "600"

    def test_only_contributing_deductions_cited(self) -> None:
        h = HouseholdInput(
            size=1,
            gross_monthly_income=100000,
            earned_income=100000,
            shelter_costs=150000,
            dependent_care_expenses=20000,
        )
        citations = _cite(h, _resolved())
        deduction_sections = [c.section_number for c in citations if c.rule_type == RuleType.DEDUCTION]
        # medical contributes nothing for this household
        assert deduction_sections == ["212", "213", "212", "214"]

    def test_categorical_citation_wording(self) -> None:
        citations = _cite(HouseholdInput(size=1, gross_monthly_income=0), _resolved(categorical_code="SSI"))
        categorical = [c for c in citations if c.rule_type == RuleType.CATEGORICAL]
        assert len(categorical) == 1
        assert categorical[0].section_number == "115"
        assert "categorical eligibility" in categorical[0].description
        assert categorical[0].description.startswith("SSI Recipients")

    def test_non_bypassing_rule_still_mentions_categorical_eligibility(self) -> None:
        text = categorical_description("Broad-Based Categorical Eligibility", bypasses_gross_test=False)
        assert "categorical eligibility" in text
        assert "gross income test still applies" in text


class TestRulesSnapshot:
    def test_ids_recorded(self) -> None:
        resolved = _resolved(size=2, categorical_code="TANF")
        deductions = calculate_deductions(HouseholdInput(size=2, gross_monthly_income=0), resolved.deductions)
        snap = build_rules_snapshot(resolved, deductions)
        assert snap.income_limit_id == "limit-2"
        assert snap.allotment_id == "allotment-2"
        assert snap.categorical_rule_id == "categorical-tanf"
        assert len(snap.deduction_ids) == 5

    def test_absent_categorical_key_omitted(self) -> None:
        resolved = _resolved()
        deductions = calculate_deductions(HouseholdInput(size=1, gross_monthly_income=0), resolved.deductions)
        dumped = build_rules_snapshot(resolved, deductions).model_dump(mode="json")
        assert dumped == {
            "effective_date": "2025-01-15",
            "income_limit_id": "limit-1",
            "allotment_id": "allotment-1",
            "deduction_ids": [
                "deduction-standard",
                "deduction-earned",
                "deduction-dependent",
                "deduction-medical",
                "deduction-shelter",
            ],
        }


class TestAuditTrail:
    def test_breakdown_copied_in_order(self) -> None:
        resolved = _resolved()
        deductions = calculate_deductions(HouseholdInput(size=1, gross_monthly_income=0), resolved.deductions)
        steps = ["Household size: 1", "Gross monthly income: $0.00", *deductions.steps]
        trail = build_audit_trail(resolved, deductions, steps, jurisdiction="Maryland", program_name="SNAP")
        assert trail.calculation_breakdown == steps
        assert trail.rules_snapshot.income_limit_id == "limit-1"
        assert len(trail.policy_citations) == 3
