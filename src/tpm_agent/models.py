# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/models.py

"""
Pydantic data models for issue analysis and the processing pipeline.
"""

from enum import Enum
from typing import Final, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


IssueType = Literal["bug", "feature", "question"]
Priority = Literal["low", "medium", "high"]

ISSUE_TYPES: Final[tuple[str, ...]] = ("bug", "feature", "question")
PRIORITIES: Final[tuple[str, ...]] = ("low", "medium", "high")
DEFAULT_ISSUE_TYPE: Final = "question"
DEFAULT_PRIORITY: Final = "medium"

# Keyword -> display label, in detection order
TOPIC_KEYWORDS: Final[tuple[tuple[str, str], ...]] = (
    ("tpm", "TPM"),
    ("security", "Security"),
    ("authentication", "Authentication"),
    ("encryption", "Encryption"),
    ("docker", "Docker"),
    ("container", "Container"),
    ("openai", "OpenAI"),
    ("azure", "Azure"),
)
TOPIC_VOCABULARY: Final[tuple[str, ...]] = tuple(label for _, label in TOPIC_KEYWORDS)


class AnalysisMethod(str, Enum):
    """Which analyzer produced a classification."""

    AZURE_OPENAI = "azure_openai"
    KEYWORD = "keyword"

    @property
    def label(self) -> str:
        """Human-readable name used in comment attribution."""
        return "Azure OpenAI" if self is AnalysisMethod.AZURE_OPENAI else "keyword analysis"


class PipelineStage(str, Enum):
    START = "start"
    ANALYZING = "analyzing"
    COMPOSING = "composing"
    POSTING = "posting"
    DONE = "done"


class TpmOperation(str, Enum):
    INFO = "info"
    CHECK = "check"
    VALIDATE = "validate"


class Classification(BaseModel):
    """Structured result of analyzing issue text."""

    model_config = ConfigDict(frozen=True)

    type: IssueType
    priority: Priority
    topics: Tuple[str, ...] = Field(default=(), description="Detected topic labels, first detection first")
    summary: str

    @field_validator("topics")
    @classmethod
    def _topics_from_vocabulary(cls, topics: Tuple[str, ...]) -> Tuple[str, ...]:
        unknown = [t for t in topics if t not in TOPIC_VOCABULARY]
        if unknown:
            raise ValueError(f"Unknown topics: {', '.join(unknown)}")
        if len(set(topics)) != len(topics):
            raise ValueError("Topics must not contain duplicates")
        return topics


class AnalysisResult(BaseModel):
    """A classification plus the method that actually produced it."""

    model_config = ConfigDict(frozen=True)

    classification: Classification
    method: AnalysisMethod


class PipelineContext(BaseModel):
    """Per-run state of the issue pipeline.

    Immutable: each step returns an updated copy via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    issue_text: str
    owner: str
    repo: str
    issue_number: int
    stage: PipelineStage = PipelineStage.START
    analysis: Optional[AnalysisResult] = None
    comment: Optional[str] = None
    comment_url: Optional[str] = None

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"
