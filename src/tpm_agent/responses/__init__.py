# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/responses/__init__.py

"""Issue comment rendering."""

from .composer import CommentComposer
from .templates import TemplateRegistry

__all__ = ["CommentComposer", "TemplateRegistry"]
