# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_tpm.py

import time

import pytest

from tpm_agent.exceptions import UnknownOperationError
from tpm_agent.tpm import TpmSimulator


@pytest.fixture
def simulator():
    return TpmSimulator(delay=0)


@pytest.mark.parametrize("operation,expected", [
    ("info", "TPM info retrieved successfully"),
    ("check", "TPM check completed successfully"),
    ("validate", "TPM validation completed successfully"),
])
def test_plain_results(simulator, operation, expected):
    assert simulator.execute(operation, "host-1") == expected


@pytest.mark.parametrize("operation,expected", [
    ("info", "TPM Info - Version: 2.0, Manufacturer: Simulated, Status: Ready, Target: host-1"),
    ("check", "TPM Status Check - Target: host-1, Health: Good, Encryption: Enabled, Keys: Available"),
    ("validate", "TPM Validation - Target: host-1, Config: Valid, Policies: Compliant, Attestation: Ready"),
])
def test_verbose_results(simulator, operation, expected):
    assert simulator.execute(operation, "host-1", verbose=True) == expected


def test_operation_case_insensitive(simulator):
    assert simulator.execute("CHECK") == "TPM check completed successfully"


def test_unknown_operation(simulator):
    with pytest.raises(UnknownOperationError, match="Unknown operation: reset") as exc_info:
        simulator.execute("reset")
    assert exc_info.value.operation == "reset"


def test_unknown_operation_skips_delay():
    start = time.monotonic()
    with pytest.raises(UnknownOperationError):
        TpmSimulator(delay=5).execute("reset")
    assert time.monotonic() - start < 1


def test_simulated_delay():
    start = time.monotonic()
    TpmSimulator(delay=0.05).execute("info")
    assert time.monotonic() - start >= 0.05
