# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/analysis/classifier.py

"""
Keyword-based classification of GitHub issues.
"""

from typing import List, Sequence, Tuple

from ..models import (
    Classification,
    DEFAULT_ISSUE_TYPE,
    DEFAULT_PRIORITY,
    TOPIC_KEYWORDS,
)

SUMMARY_LIMIT = 100


def summarize(text: str, limit: int = SUMMARY_LIMIT) -> str:
    """Return text cut to ``limit`` characters with an ellipsis marker if cut."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class KeywordClassifier:
    """Classify issue text by substring matching against fixed keyword tables."""

    def __init__(self):
        """Initialize classifier with keyword tables.

        Tables are checked in order; the first matching entry wins.
        """
        self.type_keywords: Sequence[Tuple[str, Tuple[str, ...]]] = (
            ("bug", ("bug", "error", "issue")),
            ("feature", ("feature", "enhancement", "request")),
        )
        self.priority_keywords: Sequence[Tuple[str, Tuple[str, ...]]] = (
            ("high", ("urgent", "critical", "high")),
            ("low", ("low", "minor")),
        )
        self.topic_keywords = TOPIC_KEYWORDS

    @staticmethod
    def _first_match(text: str, table, default: str) -> str:
        for value, keywords in table:
            if any(keyword in text for keyword in keywords):
                return value
        return default

    def detect_topics(self, text: str) -> List[str]:
        """
        Detect topic labels mentioned in text.

        Args:
            text: Lower-cased issue text

        Returns:
            Display labels in table order, without duplicates
        """
        topics = []
        for keyword, label in self.topic_keywords:
            if keyword in text and label not in topics:
                topics.append(label)
        return topics

    def classify(self, issue_text: str) -> Classification:
        """
        Classify issue text.

        Args:
            issue_text: Raw issue text

        Returns:
            Classification with type, priority, topics and summary
        """
        text = issue_text.lower()

        return Classification(
            type=self._first_match(text, self.type_keywords, DEFAULT_ISSUE_TYPE),
            priority=self._first_match(text, self.priority_keywords, DEFAULT_PRIORITY),
            topics=self.detect_topics(text),
            summary=summarize(issue_text),
        )


def classify_issue(issue_text: str) -> Classification:
    """Classify issue text with the default keyword tables."""
    return KeywordClassifier().classify(issue_text)
