# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/__init__.py

"""TPM agent: simulated TPM queries and GitHub issue triage for GitHub Actions."""

__version__ = "0.1.0"
