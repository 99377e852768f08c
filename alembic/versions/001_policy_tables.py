"""Policy parameter tables and the calculation log.

Revision ID: 001
Revises: None
Create Date: 2025-01-10
"""
from __future__ import annotations

from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, tuple[str, ...], None] = None
depends_on: Union[str, tuple[str, ...], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(36), server_default=sa.text("gen_random_uuid()::text"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def _effective_dated_columns() -> list[sa.Column]:
    return [
        sa.Column("benefit_program_id", sa.String(64), nullable=False, index=True),
        sa.Column("effective_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), comment="Inclusive; NULL means open-ended"),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("notes", sa.Text()),
    ]


def upgrade() -> None:
    # ── Policy parameters (amounts in cents) ──────────────────────────

    op.create_table(
        "snap_income_limits",
        sa.Column("household_size", sa.Integer(), nullable=False, index=True),
        sa.Column("gross_monthly_limit", sa.Integer(), nullable=False, comment="Cents"),
        sa.Column("net_monthly_limit", sa.Integer(), nullable=False, comment="Cents"),
        sa.Column("percent_of_poverty", sa.Integer(), nullable=False, comment="e.g. 200 for 200% FPL"),
        *_effective_dated_columns(),
        *_base_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "snap_deductions",
        sa.Column("deduction_type", sa.String(32), nullable=False, index=True),
        sa.Column("deduction_name", sa.String(200), nullable=False),
        sa.Column("calculation_type", sa.String(32), nullable=False),
        sa.Column("amount", sa.Integer(), comment="Fixed amount in cents"),
        sa.Column("percentage", sa.Integer(), comment="Whole percent, 20 = 20%"),
        sa.Column("min_amount", sa.Integer(), comment="Threshold in cents"),
        sa.Column("max_amount", sa.Integer(), comment="Cap in cents"),
        *_effective_dated_columns(),
        *_base_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "snap_allotments",
        sa.Column("household_size", sa.Integer(), nullable=False, index=True),
        sa.Column("max_monthly_benefit", sa.Integer(), nullable=False, comment="Cents"),
        sa.Column("min_monthly_benefit", sa.Integer(), comment="Cents, 1-2 person households"),
        *_effective_dated_columns(),
        *_base_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "categorical_eligibility_rules",
        sa.Column("rule_name", sa.String(200), nullable=False),
        sa.Column("rule_code", sa.String(16), nullable=False, index=True),
        sa.Column("description", sa.Text()),
        sa.Column("bypass_gross_income_test", sa.Boolean(), nullable=False),
        sa.Column("bypass_asset_test", sa.Boolean(), nullable=False),
        sa.Column("bypass_net_income_test", sa.Boolean(), nullable=False),
        *_effective_dated_columns(),
        *_base_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "document_requirement_rules",
        sa.Column("requirement_name", sa.String(200), nullable=False),
        sa.Column("document_type", sa.String(32), nullable=False),
        sa.Column("required_when", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("acceptable_documents", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("validity_period", sa.Integer(), comment="Days a document stays valid"),
        sa.Column("is_required", sa.Boolean(), nullable=False),
        *_effective_dated_columns(),
        *_base_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ── Calculation log ───────────────────────────────────────────────

    op.create_table(
        "eligibility_calculations",
        sa.Column("benefit_program_id", sa.String(64), nullable=False, index=True),
        sa.Column("calculated_by", sa.String(100), comment="User ID or 'system'"),
        sa.Column("household_size", sa.Integer(), nullable=False),
        sa.Column("gross_monthly_income", sa.Integer(), nullable=False),
        sa.Column("categorical_eligibility", sa.String(16)),
        sa.Column("net_monthly_income", sa.Integer(), nullable=False),
        sa.Column("deductions", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("is_eligible", sa.Boolean(), nullable=False),
        sa.Column("monthly_benefit", sa.Integer(), nullable=False),
        sa.Column("ineligibility_reasons", postgresql.JSONB(astext_type=sa.Text())),
        sa.Column("rules_snapshot", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        *_base_columns(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("eligibility_calculations")
    op.drop_table("document_requirement_rules")
    op.drop_table("categorical_eligibility_rules")
    op.drop_table("snap_allotments")
    op.drop_table("snap_deductions")
    op.drop_table("snap_income_limits")
