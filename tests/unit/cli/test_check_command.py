"""Unit tests for check CLI command."""

from __future__ import annotations

from cli.main import main
from core.types import CheckResult


def test_cli_check_returns_zero_when_all_checks_pass(tmp_path, monkeypatch, capsys) -> None:
    """Check command should print the report and succeed."""
    monkeypatch.setattr(
        "cli.check_command.run_store_checks",
        lambda store: (CheckResult(name="protoc --version", passed=True, detail="libprotoc 29.3"),),
    )

    exit_code = main(["--store-root", str(tmp_path), "check"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert output == ["[PASS] protoc --version :: libprotoc 29.3", "passed=1", "failed=0"]


def test_cli_check_returns_one_when_a_check_fails(tmp_path, monkeypatch) -> None:
    """Any failed row should make the command fail."""
    monkeypatch.setattr(
        "cli.check_command.run_store_checks",
        lambda store: (
            CheckResult(name="protoc --version", passed=True, detail="libprotoc 29.3"),
            CheckResult(name="descriptor.proto", passed=False, detail="not found"),
        ),
    )

    assert main(["--store-root", str(tmp_path), "check"]) == 1
