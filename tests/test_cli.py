"""Tests for the rules-engine CLI."""

from __future__ import annotations

import json

import pytest

from rules_engine.cli import main


@pytest.fixture()
def policy_file(snapshot, tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(snapshot.model_dump_json(), encoding="utf-8")
    return path


def _household_file(tmp_path, **data):
    path = tmp_path / "household.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCalculateCommand:
    def test_prints_result_json(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=0)
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy_file), "--as-of", "2025-01-15"])
        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["is_eligible"] is True
        assert result["monthly_benefit"] == 29100
        assert result["rules_snapshot"]["effective_date"] == "2025-01-15"

    def test_engine_error_exit_code(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=6, gross_monthly_income=0)
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy_file), "--as-of", "2025-01-15"])
        assert code == 1
        assert "No active income limit" in capsys.readouterr().err

    def test_invalid_household_exit_code(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=0, gross_monthly_income=0)
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy_file)])
        assert code == 1
        assert "Invalid household input" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys) -> None:
        code = main(["calculate", "md-snap", str(tmp_path / "nope.json"), "--policy", str(tmp_path / "p.json")])
        assert code == 1
        assert "not found" in capsys.readouterr().err


class TestChecklistCommand:
    def test_prints_items(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=90000, earned_income=90000)
        code = main(["checklist", "md-snap", str(household), "--policy", str(policy_file), "--as-of", "2025-01-15"])
        assert code == 0
        items = json.loads(capsys.readouterr().out)
        by_name = {item["document_type"]: item for item in items}
        assert by_name["Pay stubs (last 30 days)"]["required"] is True
        assert by_name["Pay stubs (last 30 days)"]["validity_days"] == 60


class TestInputErrors:
    """Bad input files end in exit code 1 and a message on stderr."""

    def test_malformed_household_json(self, policy_file, tmp_path, capsys) -> None:
        household = tmp_path / "household.json"
        household.write_text("{size: 1,", encoding="utf-8")
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy_file), "--as-of", "2025-01-15"])
        assert code == 1
        assert "is not valid JSON" in capsys.readouterr().err

    def test_household_json_array(self, policy_file, tmp_path, capsys) -> None:
        household = tmp_path / "household.json"
        household.write_text("[1, 2]", encoding="utf-8")
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy_file), "--as-of", "2025-01-15"])
        assert code == 1
        assert "expected an object" in capsys.readouterr().err

    def test_misspelled_household_key(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=0, hasElderly=True)
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy_file), "--as-of", "2025-01-15"])
        assert code == 1
        assert "hasElderly" in capsys.readouterr().err

    def test_malformed_policy_file(self, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=0)
        policy = tmp_path / "policy.json"
        policy.write_text("not json", encoding="utf-8")
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy), "--as-of", "2025-01-15"])
        assert code == 1
        assert "invalid policy records" in capsys.readouterr().err

    def test_invalid_policy_record(self, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=0)
        policy = tmp_path / "policy.json"
        policy.write_text(json.dumps({"income_limits": [{"id": "limit-1"}]}), encoding="utf-8")
        code = main(["calculate", "md-snap", str(household), "--policy", str(policy), "--as-of", "2025-01-15"])
        assert code == 1
        assert "invalid policy records" in capsys.readouterr().err


class TestLogLevelOption:
    def test_unknown_level_is_usage_error(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=0)
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "chatty", "calculate", "md-snap", str(household), "--policy", str(policy_file)])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_lowercase_level_accepted(self, policy_file, tmp_path, capsys) -> None:
        household = _household_file(tmp_path, size=1, gross_monthly_income=0)
        code = main(
            ["--log-level", "warning", "calculate", "md-snap", str(household),
             "--policy", str(policy_file), "--as-of", "2025-01-15"]
        )
        assert code == 0
        assert json.loads(capsys.readouterr().out)["monthly_benefit"] == 29100
