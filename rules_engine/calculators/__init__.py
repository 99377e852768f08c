"""Benefit calculators — deductions, income tests, benefit amount."""

from rules_engine.calculators.benefit import calculate_benefit
from rules_engine.calculators.deductions import calculate_deductions, select_deduction_rules
from rules_engine.calculators.income_tests import (
    ELDERLY_DISABLED_EXEMPTION,
    calculate_net_income,
    evaluate_income_tests,
)
from rules_engine.calculators.money import format_cents

__all__ = [
    "calculate_benefit",
    "calculate_deductions",
    "select_deduction_rules",
    "calculate_net_income",
    "evaluate_income_tests",
    "ELDERLY_DISABLED_EXEMPTION",
    "format_cents",
]
