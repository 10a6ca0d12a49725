# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_action.py

"""
Tests for the shared GitHub Action output shell.
"""

import re

from tpm_agent.action import ActionOutcome, format_output, run_action, write_outputs
from tpm_agent.exceptions import PostingError, UnknownOperationError


def test_format_single_line():
    assert format_output("status", "success") == "status=success\n"


def test_format_multi_line_uses_delimiter():
    text = format_output("result", "line one\nline two")
    match = re.fullmatch(r"result<<(\S+)\nline one\nline two\n(\S+)\n", text)
    assert match
    assert match.group(1) == match.group(2)


def test_success_outputs(tmp_path):
    output = tmp_path / "github_output"
    fallback = tmp_path / "fallback.txt"

    outcome = run_action(lambda: "TPM info retrieved successfully", output_path=output, fallback_path=fallback)

    assert outcome == ActionOutcome(status="success", result="TPM info retrieved successfully")
    assert outcome.ok
    expected = "result=TPM info retrieved successfully\nstatus=success\n"
    assert output.read_text() == expected
    assert fallback.read_text() == expected


def test_agent_error_outputs(tmp_path):
    fallback = tmp_path / "fallback.txt"

    def use_case():
        raise UnknownOperationError("reset")

    outcome = run_action(use_case, fallback_path=fallback)

    assert not outcome.ok
    assert outcome.result == "Error: Unknown operation: reset"
    assert fallback.read_text() == "result=Error: Unknown operation: reset\nstatus=error\n"


def test_posting_error_reported(tmp_path):
    def use_case():
        raise PostingError("Failed to post comment to o/r#1: forbidden", status=403, reason="forbidden")

    outcome = run_action(use_case, fallback_path=tmp_path / "fallback.txt")
    assert outcome.status == "error"
    assert "forbidden" in outcome.result


def test_unexpected_error_reported(tmp_path):
    def use_case():
        raise RuntimeError("boom")

    outcome = run_action(use_case, fallback_path=tmp_path / "fallback.txt")
    assert outcome == ActionOutcome(status="error", result="Error: boom")


def test_github_output_appended(tmp_path):
    output = tmp_path / "github_output"
    output.write_text("previous=1\n")

    write_outputs(ActionOutcome("success", "done"), output_path=output, fallback_path=None)

    assert output.read_text() == "previous=1\nresult=done\nstatus=success\n"


def test_fallback_overwritten(tmp_path):
    fallback = tmp_path / "fallback.txt"
    fallback.write_text("stale\n")

    write_outputs(ActionOutcome("success", "done"), fallback_path=fallback)

    assert fallback.read_text() == "result=done\nstatus=success\n"


def test_unwritable_fallback_is_not_fatal(tmp_path):
    missing_dir = tmp_path / "missing" / "fallback.txt"
    output = tmp_path / "github_output"

    write_outputs(ActionOutcome("success", "done"), output_path=output, fallback_path=missing_dir)

    assert output.read_text() == "result=done\nstatus=success\n"
