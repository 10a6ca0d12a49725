# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/responses/composer.py

"""
Comment composition for analyzed GitHub issues.
"""

from typing import Any, Dict, Optional

from ..models import AnalysisResult
from .templates import TemplateRegistry


class CommentComposer:
    """Render an analysis into a Markdown issue comment."""

    def __init__(self, templates: Optional[TemplateRegistry] = None):
        self.templates = templates or TemplateRegistry()

    def _build_template_context(self, analysis: AnalysisResult, issue_text: str) -> Dict[str, Any]:
        classification = analysis.classification
        return {
            "method": analysis.method.label,
            "classification": classification,
            "show_summary": bool(classification.summary) and classification.summary != issue_text,
            "additional_info": any(
                topic in self.templates.ADDITIONAL_INFO_TOPICS for topic in classification.topics
            ),
        }

    def compose(self, analysis: AnalysisResult, issue_text: str) -> str:
        """
        Compose the comment for an analyzed issue.

        Args:
            analysis: Classification and the method that produced it
            issue_text: Original issue text

        Returns:
            Markdown comment body
        """
        context = self._build_template_context(analysis, issue_text)
        return self.templates.render_comment(context)
