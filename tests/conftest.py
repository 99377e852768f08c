"""Shared policy fixtures — Maryland SNAP figures, FY2025 (amounts in cents)."""

from __future__ import annotations

from datetime import date

import pytest

from rules_engine.config import EngineSettings
from rules_engine.eligibility import EligibilityEngine
from rules_engine.repository import InMemoryPolicyRepository
from rules_engine.schemas.policy import (
    Allotment,
    CategoricalEligibilityRule,
    DeductionRule,
    DocumentRequirementRule,
    IncomeLimit,
    PolicySnapshot,
)

PROGRAM_ID = "md-snap"
AS_OF = date(2025, 1, 15)
FY_START = date(2024, 10, 1)
FY_END = date(2025, 9, 30)

# size: (gross, net)
INCOME_LIMITS = {
    1: (230100, 115050),
    2: (310900, 155450),
    3: (391700, 195850),
    4: (472500, 236250),
    8: (795700, 397850),
}

# size: (max, min)
ALLOTMENTS = {
    1: (29100, 2300),
    2: (53500, 2300),
    3: (76600, None),
    4: (97500, None),
    8: (175400, None),
}


def _dated() -> dict[str, object]:
    return {"benefit_program_id": PROGRAM_ID, "effective_date": FY_START, "end_date": FY_END}


def build_deductions() -> list[DeductionRule]:
    return [
        DeductionRule(id="deduction-standard", deduction_type="standard", amount=19300, **_dated()),
        DeductionRule(id="deduction-earned", deduction_type="earned_income", percentage=20, **_dated()),
        DeductionRule(id="deduction-dependent", deduction_type="dependent_care", max_amount=20000000, **_dated()),
        DeductionRule(id="deduction-medical", deduction_type="medical", min_amount=3500, **_dated()),
        DeductionRule(id="deduction-shelter", deduction_type="shelter", max_amount=67700, **_dated()),
    ]


def build_snapshot() -> PolicySnapshot:
    return PolicySnapshot(
        income_limits=[
            IncomeLimit(
                id=f"limit-{size}",
                household_size=size,
                gross_monthly_limit=gross,
                net_monthly_limit=net,
                percent_of_poverty=200,
                **_dated(),
            )
            for size, (gross, net) in INCOME_LIMITS.items()
        ],
        deductions=build_deductions(),
        allotments=[
            Allotment(
                id=f"allotment-{size}",
                household_size=size,
                max_monthly_benefit=max_benefit,
                min_monthly_benefit=min_benefit,
                **_dated(),
            )
            for size, (max_benefit, min_benefit) in ALLOTMENTS.items()
        ],
        categorical_rules=[
            CategoricalEligibilityRule(
                id="categorical-ssi", rule_name="SSI Recipients", rule_code="SSI",
                bypass_gross_income_test=True, **_dated(),
            ),
            CategoricalEligibilityRule(
                id="categorical-tanf", rule_name="TANF Recipients", rule_code="TANF",
                bypass_gross_income_test=True, **_dated(),
            ),
            CategoricalEligibilityRule(
                id="categorical-bbce", rule_name="Broad-Based Categorical Eligibility", rule_code="BBCE",
                bypass_gross_income_test=False, **_dated(),
            ),
        ],
        document_requirements=[
            DocumentRequirementRule(
                id="doc-identity", requirement_name="Proof of identity", document_type="identity",
                acceptable_documents=["Driver's license", "Passport"], is_required=True, **_dated(),
            ),
            DocumentRequirementRule(
                id="doc-paystubs", requirement_name="Pay stubs (last 30 days)", document_type="income",
                required_when={"has_earned_income": True}, acceptable_documents=["Pay stubs"],
                validity_period=60, is_required=False, **_dated(),
            ),
            DocumentRequirementRule(
                id="doc-shelter", requirement_name="Rent or mortgage statement", document_type="expenses",
                required_when={"has_shelter_costs": True}, acceptable_documents=["Lease", "Mortgage statement"],
                is_required=False, notes="Include utility bills if paid separately", **_dated(),
            ),
        ],
    )


@pytest.fixture()
def snapshot() -> PolicySnapshot:
    return build_snapshot()


@pytest.fixture()
def repository(snapshot: PolicySnapshot) -> InMemoryPolicyRepository:
    return InMemoryPolicyRepository(snapshot)


@pytest.fixture()
def engine_settings() -> EngineSettings:
    return EngineSettings(jurisdiction="Maryland", program_name="SNAP", calculation_timeout_seconds=5)


@pytest.fixture()
def engine(repository: InMemoryPolicyRepository, engine_settings: EngineSettings) -> EligibilityEngine:
    return EligibilityEngine(repository, engine_settings=engine_settings, today=lambda: AS_OF)
