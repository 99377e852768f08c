"""Policy parameter models — income limits, deductions, allotments, categorical rules.

All currency columns are Integer minor units (cents) — never float.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from rules_engine.models.base import Base, EffectiveDatedMixin, TimestampMixin


class IncomeLimitRecord(EffectiveDatedMixin, TimestampMixin, Base):
    """Gross and net monthly income limits for one household size."""

    __tablename__ = "snap_income_limits"

    household_size: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    gross_monthly_limit: Mapped[int] = mapped_column(Integer, nullable=False, comment="Cents")
    net_monthly_limit: Mapped[int] = mapped_column(Integer, nullable=False, comment="Cents")
    percent_of_poverty: Mapped[int] = mapped_column(Integer, nullable=False, comment="e.g. 200 for 200% FPL")

    def __repr__(self) -> str:
        return f"<IncomeLimitRecord size={self.household_size} gross={self.gross_monthly_limit}>"


class DeductionRecord(EffectiveDatedMixin, TimestampMixin, Base):
    """One deduction rule (standard, earned income, dependent care, medical, shelter)."""

    __tablename__ = "snap_deductions"

    deduction_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    deduction_name: Mapped[str] = mapped_column(String(200), nullable=False)
    calculation_type: Mapped[str] = mapped_column(String(32), nullable=False)
    amount: Mapped[int | None] = mapped_column(Integer, comment="Fixed amount in cents")
    percentage: Mapped[int | None] = mapped_column(Integer, comment="Whole percent, 20 = 20%")
    min_amount: Mapped[int | None] = mapped_column(Integer, comment="Threshold in cents")
    max_amount: Mapped[int | None] = mapped_column(Integer, comment="Cap in cents")

    def __repr__(self) -> str:
        return f"<DeductionRecord type={self.deduction_type}>"


class AllotmentRecord(EffectiveDatedMixin, TimestampMixin, Base):
    """Maximum (and optional minimum) monthly benefit for one household size."""

    __tablename__ = "snap_allotments"

    household_size: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    max_monthly_benefit: Mapped[int] = mapped_column(Integer, nullable=False, comment="Cents")
    min_monthly_benefit: Mapped[int | None] = mapped_column(Integer, comment="Cents, 1-2 person households")

    def __repr__(self) -> str:
        return f"<AllotmentRecord size={self.household_size} max={self.max_monthly_benefit}>"


class CategoricalEligibilityRecord(EffectiveDatedMixin, TimestampMixin, Base):
    """Categorical eligibility rule keyed by program participation code."""

    __tablename__ = "categorical_eligibility_rules"

    rule_name: Mapped[str] = mapped_column(String(200), nullable=False)
    rule_code: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    bypass_gross_income_test: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    bypass_asset_test: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    bypass_net_income_test: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<CategoricalEligibilityRecord code={self.rule_code}>"


class DocumentRequirementRecord(EffectiveDatedMixin, TimestampMixin, Base):
    """Verification document requirement and the household conditions that trigger it."""

    __tablename__ = "document_requirement_rules"

    requirement_name: Mapped[str] = mapped_column(String(200), nullable=False)
    document_type: Mapped[str] = mapped_column(String(32), nullable=False)
    required_when: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    acceptable_documents: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    validity_period: Mapped[int | None] = mapped_column(Integer, comment="Days a document stays valid")
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<DocumentRequirementRecord {self.requirement_name}>"
