# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/analysis/__init__.py

"""Issue analysis: keyword heuristics and the Azure OpenAI analyzer."""

from .classifier import KeywordClassifier, classify_issue
from .remote import RemoteAnalyzer

__all__ = ["KeywordClassifier", "classify_issue", "RemoteAnalyzer"]
