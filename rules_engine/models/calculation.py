"""EligibilityCalculation model — append-only log of eligibility determinations.

Persisting a result is optional and decided by the caller; the engine itself
never writes.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from rules_engine.models.base import Base, TimestampMixin


class EligibilityCalculation(TimestampMixin, Base):
    """Snapshot of one calculation's inputs, outcome and the policy records used."""

    __tablename__ = "eligibility_calculations"

    benefit_program_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    calculated_by: Mapped[str | None] = mapped_column(String(100), comment="User ID or 'system'")

    # Inputs
    household_size: Mapped[int] = mapped_column(Integer, nullable=False)
    gross_monthly_income: Mapped[int] = mapped_column(Integer, nullable=False)
    categorical_eligibility: Mapped[str | None] = mapped_column(String(16))

    # Results
    net_monthly_income: Mapped[int] = mapped_column(Integer, nullable=False)
    deductions: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    is_eligible: Mapped[bool] = mapped_column(Boolean, nullable=False)
    monthly_benefit: Mapped[int] = mapped_column(Integer, nullable=False)
    ineligibility_reasons: Mapped[list[str] | None] = mapped_column(JSONB)
    rules_snapshot: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)

    def __repr__(self) -> str:
        return f"<EligibilityCalculation eligible={self.is_eligible} benefit={self.monthly_benefit}>"
