"""Policy parameter repositories — the engine's only source of policy data."""

from rules_engine.repository.base import PolicyRepository
from rules_engine.repository.memory import InMemoryPolicyRepository
from rules_engine.repository.sql import SqlPolicyRepository, log_calculation

__all__ = [
    "PolicyRepository",
    "InMemoryPolicyRepository",
    "SqlPolicyRepository",
    "log_calculation",
]
