"""Household facts supplied by the caller for one calculation.

Immutable once built. Amounts are integer cents.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rules_engine.models.enums import CategoricalCode


class HouseholdInput(BaseModel):
    """Financial and demographic facts about a household.

    earned_income + unearned_income == gross_monthly_income is the caller's
    responsibility and is not re-checked here. Unknown keys are rejected so a
    misspelled flag or expense cannot drop out of a determination.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    size: int = Field(ge=1, description="Household member count")
    gross_monthly_income: int = Field(ge=0)
    earned_income: int = Field(default=0, ge=0)
    unearned_income: int = Field(default=0, ge=0)

    has_elderly: bool = False    # member aged 60+
    has_disabled: bool = False

    shelter_costs: int | None = Field(default=None, ge=0)           # rent + utilities
    medical_expenses: int | None = Field(default=None, ge=0)        # counted for elderly/disabled only
    dependent_care_expenses: int | None = Field(default=None, ge=0)

    categorical_eligibility: CategoricalCode | None = None

    @field_validator("categorical_eligibility", mode="before")
    @classmethod
    def parse_categorical_code(cls, v: object) -> CategoricalCode | None:
        """Blank means no code; unrecognized codes become UNKNOWN."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return CategoricalCode.parse(v)

    @property
    def is_elderly_or_disabled(self) -> bool:
        return self.has_elderly or self.has_disabled
