"""Personalized verification document checklist."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from rules_engine.schemas.eligibility import DocumentChecklistItem
from rules_engine.schemas.household import HouseholdInput
from rules_engine.schemas.policy import DocumentRequirementRule

logger = logging.getLogger(__name__)

# required_when keys → household predicate
REQUIRED_WHEN_CONDITIONS: dict[str, Callable[[HouseholdInput], bool]] = {
    "has_income": lambda h: h.gross_monthly_income > 0,
    "has_earned_income": lambda h: h.earned_income > 0,
    "has_dependent_care": lambda h: bool(h.dependent_care_expenses),
    "has_medical_expenses": lambda h: bool(h.medical_expenses),
    "has_shelter_costs": lambda h: bool(h.shelter_costs),
}


def _is_required(household: HouseholdInput, requirement: DocumentRequirementRule) -> bool:
    """A requirement is required by default or when any of its flagged conditions holds."""
    if requirement.is_required:
        return True
    for key, flagged in requirement.required_when.items():
        if not flagged:
            continue
        predicate = REQUIRED_WHEN_CONDITIONS.get(key)
        if predicate is None:
            logger.debug("Unknown required_when condition %r on %s", key, requirement.id)
            continue
        if predicate(household):
            return True
    return False


def build_document_checklist(
    household: HouseholdInput,
    requirements: Iterable[DocumentRequirementRule],
) -> list[DocumentChecklistItem]:
    """Turn active document requirements into checklist items for a household."""
    return [
        DocumentChecklistItem(
            category=requirement.document_type,
            document_type=requirement.requirement_name,
            required=_is_required(household, requirement),
            acceptable_documents=list(requirement.acceptable_documents),
            validity_days=requirement.validity_period,
            notes=requirement.notes,
        )
        for requirement in requirements
    ]
