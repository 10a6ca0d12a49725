# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/__main__.py

from tpm_agent.cli import app

app(prog_name="tpm-agent")
