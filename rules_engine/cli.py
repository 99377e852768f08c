"""
Command-line interface for the rules engine.

Usage:
    rules-engine calculate md-snap household.json --policy policy.json
    rules-engine calculate md-snap household.json --as-of 2025-01-15
    rules-engine checklist md-snap household.json --policy policy.json

Without --policy, policy records are read from the configured database.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any

import pydantic

from rules_engine.config import LOG_LEVELS
from rules_engine.eligibility import EligibilityEngine
from rules_engine.errors import RulesEngineError
from rules_engine.logging_config import configure_logging
from rules_engine.repository import InMemoryPolicyRepository, SqlPolicyRepository

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rules-engine",
        description="Calculate benefit eligibility against versioned policy records",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL from settings",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("calculate", "Determine eligibility and monthly benefit"),
        ("checklist", "List verification documents for a household"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("program_id", help="Benefit program id")
        sub.add_argument("household", type=Path, help="Household JSON file (amounts in cents)")
        sub.add_argument(
            "--policy",
            type=Path,
            help="Policy snapshot JSON file (default: read from the database)",
        )
        sub.add_argument(
            "--as-of",
            type=date.fromisoformat,
            default=None,
            help="Effective date, YYYY-MM-DD (default: today)",
        )
    return parser


async def _run_with_engine(args: argparse.Namespace, household: Any) -> str:
    async def run(engine: EligibilityEngine) -> str:
        if args.command == "calculate":
            result = await engine.calculate_eligibility(args.program_id, household, as_of=args.as_of)
            return result.model_dump_json(indent=2)
        items = await engine.get_document_checklist(args.program_id, household, as_of=args.as_of)
        return json.dumps([item.model_dump(mode="json") for item in items], indent=2)

    if args.policy is not None:
        return await run(EligibilityEngine(InMemoryPolicyRepository.from_json_file(args.policy)))

    from rules_engine.db.engine import close_db, session_scope

    try:
        async with session_scope() as db:
            return await run(EligibilityEngine(SqlPolicyRepository(db)))
    finally:
        await close_db()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    for path in (args.household, args.policy):
        if path is not None and not path.exists():
            print(f"Error: {path} not found", file=sys.stderr)
            return 1

    try:
        household = json.loads(args.household.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        print(f"Error: {args.household} is not valid JSON: {exc}", file=sys.stderr)
        return 1

    try:
        output = asyncio.run(_run_with_engine(args, household))
    except RulesEngineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (json.JSONDecodeError, pydantic.ValidationError) as exc:
        print(f"Error: invalid policy records: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0
