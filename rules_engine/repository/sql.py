"""SQLAlchemy-backed policy repository and calculation log.

Each lookup filters to active records whose [effective_date, end_date]
window contains as_of and returns the newest one. The session is owned by
the caller; this module never commits.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from sqlalchemy import ColumnElement, and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from rules_engine.models.calculation import EligibilityCalculation
from rules_engine.models.enums import CategoricalCode
from rules_engine.models.policy import (
    AllotmentRecord,
    CategoricalEligibilityRecord,
    DeductionRecord,
    DocumentRequirementRecord,
    IncomeLimitRecord,
)
from rules_engine.schemas.eligibility import EligibilityResult
from rules_engine.schemas.household import HouseholdInput
from rules_engine.schemas.policy import (
    Allotment,
    CategoricalEligibilityRule,
    DeductionRule,
    DocumentRequirementRule,
    IncomeLimit,
)

logger = logging.getLogger(__name__)


def _current(model: Any, benefit_program_id: str, as_of: date) -> ColumnElement[bool]:
    """WHERE clause for records of a program in force on as_of."""
    return and_(
        model.benefit_program_id == benefit_program_id,
        model.is_active.is_(True),
        model.effective_date <= as_of,
        or_(model.end_date.is_(None), model.end_date >= as_of),
    )


class SqlPolicyRepository:
    """PolicyRepository over the policy tables. AsyncSession passed at construction."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_active_income_limit(
        self, benefit_program_id: str, household_size: int, as_of: date
    ) -> IncomeLimit | None:
        stmt = (
            select(IncomeLimitRecord)
            .where(_current(IncomeLimitRecord, benefit_program_id, as_of))
            .where(IncomeLimitRecord.household_size == household_size)
            .order_by(IncomeLimitRecord.effective_date.desc(), IncomeLimitRecord.id)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        row = result.scalars().first()
        return IncomeLimit.model_validate(row) if row is not None else None

    async def get_active_deductions(self, benefit_program_id: str, as_of: date) -> list[DeductionRule]:
        stmt = (
            select(DeductionRecord)
            .where(_current(DeductionRecord, benefit_program_id, as_of))
            .order_by(DeductionRecord.deduction_type, DeductionRecord.effective_date.desc(), DeductionRecord.id)
        )
        result = await self.db.execute(stmt)
        return [DeductionRule.model_validate(row) for row in result.scalars().all()]

    async def get_active_allotment(
        self, benefit_program_id: str, household_size: int, as_of: date
    ) -> Allotment | None:
        stmt = (
            select(AllotmentRecord)
            .where(_current(AllotmentRecord, benefit_program_id, as_of))
            .where(AllotmentRecord.household_size == household_size)
            .order_by(AllotmentRecord.effective_date.desc(), AllotmentRecord.id)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        row = result.scalars().first()
        return Allotment.model_validate(row) if row is not None else None

    async def get_categorical_rule(
        self, benefit_program_id: str, code: CategoricalCode, as_of: date
    ) -> CategoricalEligibilityRule | None:
        stmt = (
            select(CategoricalEligibilityRecord)
            .where(_current(CategoricalEligibilityRecord, benefit_program_id, as_of))
            .where(CategoricalEligibilityRecord.rule_code == code.value)
            .order_by(CategoricalEligibilityRecord.effective_date.desc(), CategoricalEligibilityRecord.id)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        row = result.scalars().first()
        return CategoricalEligibilityRule.model_validate(row) if row is not None else None

    async def get_document_requirements(
        self, benefit_program_id: str, as_of: date
    ) -> list[DocumentRequirementRule]:
        stmt = (
            select(DocumentRequirementRecord)
            .where(_current(DocumentRequirementRecord, benefit_program_id, as_of))
            .order_by(DocumentRequirementRecord.document_type, DocumentRequirementRecord.requirement_name)
        )
        result = await self.db.execute(stmt)
        return [DocumentRequirementRule.model_validate(row) for row in result.scalars().all()]


async def log_calculation(
    db: AsyncSession,
    benefit_program_id: str,
    household: HouseholdInput,
    result: EligibilityResult,
    calculated_by: str | None = None,
) -> EligibilityCalculation:
    """Add an EligibilityCalculation row for a finished result and flush it."""
    record = EligibilityCalculation(
        benefit_program_id=benefit_program_id,
        calculated_by=calculated_by,
        household_size=household.size,
        gross_monthly_income=household.gross_monthly_income,
        categorical_eligibility=(
            household.categorical_eligibility.value if household.categorical_eligibility else None
        ),
        net_monthly_income=result.net_monthly_income,
        deductions=result.deductions.model_dump(mode="json"),
        is_eligible=result.is_eligible,
        monthly_benefit=result.monthly_benefit,
        ineligibility_reasons=result.ineligibility_reasons,
        rules_snapshot=result.rules_snapshot.model_dump(mode="json"),
    )
    db.add(record)
    await db.flush()
    logger.info(
        "Logged eligibility calculation for program %s (eligible=%s)",
        benefit_program_id,
        result.is_eligible,
    )
    return record
