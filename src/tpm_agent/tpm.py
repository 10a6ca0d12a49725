# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/tpm.py

"""
Simulated TPM operations.

No TPM device is touched: each operation waits a short, fixed delay and
returns a canned status string.
"""

import time

from loguru import logger

from .exceptions import UnknownOperationError
from .models import TpmOperation

SIMULATED_DELAY = 0.1


class TpmSimulator:
    """Answer info/check/validate requests with canned TPM status strings."""

    def __init__(self, delay: float = SIMULATED_DELAY):
        self.delay = delay

    def execute(self, operation: str, target: str = "", verbose: bool = False) -> str:
        """
        Execute a simulated TPM operation.

        Args:
            operation: One of info, check, validate (case-insensitive)
            target: Free-form target name echoed in verbose output
            verbose: Return the detailed status line

        Returns:
            Status string for the operation

        Raises:
            UnknownOperationError: If the operation is not recognized
        """
        try:
            op = TpmOperation(operation.strip().lower())
        except ValueError:
            raise UnknownOperationError(operation) from None

        logger.info(f"Executing operation: {op.value}")
        handlers = {
            TpmOperation.INFO: self.info,
            TpmOperation.CHECK: self.check,
            TpmOperation.VALIDATE: self.validate,
        }
        return handlers[op](target, verbose)

    def _simulate(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def info(self, target: str, verbose: bool) -> str:
        logger.info("Getting TPM information...")
        self._simulate()
        if verbose:
            return f"TPM Info - Version: 2.0, Manufacturer: Simulated, Status: Ready, Target: {target}"
        return "TPM info retrieved successfully"

    def check(self, target: str, verbose: bool) -> str:
        logger.info(f"Checking TPM status for target: {target}")
        self._simulate()
        if verbose:
            return f"TPM Status Check - Target: {target}, Health: Good, Encryption: Enabled, Keys: Available"
        return "TPM check completed successfully"

    def validate(self, target: str, verbose: bool) -> str:
        logger.info(f"Validating TPM configuration for target: {target}")
        self._simulate()
        if verbose:
            return f"TPM Validation - Target: {target}, Config: Valid, Policies: Compliant, Attestation: Ready"
        return "TPM validation completed successfully"
