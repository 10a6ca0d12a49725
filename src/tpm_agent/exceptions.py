# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/exceptions.py

"""
Exception classes for the TPM agent.

Input and operation errors are raised before any external call is made.
RemoteAnalysisError never leaves the remote analyzer; PostingError is the
only externally caused failure that reaches the action shell.
"""

from typing import Optional


class TpmAgentError(Exception):
    """Base exception for all TPM agent errors."""
    pass


class InvalidInputError(TpmAgentError):
    """Raised when a required input is missing or malformed."""
    pass


class InvalidRepositoryError(InvalidInputError):
    """Raised when a repository identifier is not in 'owner/name' form."""

    def __init__(self, repository: str):
        self.repository = repository
        super().__init__(
            f"Invalid repository '{repository}': expected 'owner/name'"
        )


class RemoteAnalysisError(TpmAgentError):
    """Raised when the hosted model cannot produce a usable classification."""
    pass


class PostingError(TpmAgentError):
    """Raised when a comment cannot be posted to an issue."""

    def __init__(self, message: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.status = status
        self.reason = reason
        super().__init__(message)


class UnknownOperationError(TpmAgentError):
    """Raised for a TPM operation name outside info/check/validate."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unknown operation: {operation}")
