# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/analysis/remote.py

"""
Issue classification through an Azure OpenAI deployment.

The analyzer never fails: any problem with the remote call or its response
is logged and the keyword classification of the same text is returned.
"""

import json
import re
from typing import Any, List, Optional

import openai
from loguru import logger

from ..config import RemoteModelConfig
from ..exceptions import RemoteAnalysisError
from ..models import (
    AnalysisMethod,
    AnalysisResult,
    Classification,
    DEFAULT_ISSUE_TYPE,
    DEFAULT_PRIORITY,
    ISSUE_TYPES,
    PRIORITIES,
    TOPIC_VOCABULARY,
)
from .classifier import KeywordClassifier

DEFAULT_SUMMARY = "AI analysis completed"
RESPONSE_KEYS = ("type", "priority", "topics", "summary")

SYSTEM_PROMPT = "You are a GitHub issue triage assistant. Reply with JSON only."

ANALYSIS_PROMPT = """Analyze the following GitHub issue and classify it.

Issue:
\"\"\"
{issue_text}
\"\"\"

Respond with a single JSON object with exactly these keys:
- "type": one of "bug", "feature", "question"
- "priority": one of "low", "medium", "high"
- "topics": array of zero or more of {topics}
- "summary": one sentence summarizing the issue

Do not include any text outside the JSON object."""

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def build_prompt(issue_text: str) -> str:
    """Embed issue text in the classification prompt."""
    topics = ", ".join(f'"{topic}"' for topic in TOPIC_VOCABULARY)
    return ANALYSIS_PROMPT.format(issue_text=issue_text, topics=topics)


def _strip_code_fence(content: str) -> str:
    match = _FENCE_RE.match(content.strip())
    return match.group(1) if match else content.strip()


def _read_choice(data: dict, key: str, allowed: tuple, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return default
    value = value.strip().lower()
    if value not in allowed:
        logger.warning(f"Model returned unsupported {key} '{value}', using '{default}'")
        return default
    return value


def _read_topics(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []

    by_lower = {topic.lower(): topic for topic in TOPIC_VOCABULARY}
    topics = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            continue
        label = by_lower.get(item.strip().lower())
        if label is None:
            logger.debug(f"Dropping unknown topic from model response: {item}")
            continue
        if label not in topics:
            topics.append(label)
    return topics


def parse_model_response(content: Optional[str]) -> Classification:
    """
    Parse a model completion into a Classification.

    Args:
        content: Raw completion text, expected to hold a JSON object

    Returns:
        Classification with enumerations coerced to known values

    Raises:
        RemoteAnalysisError: If the content is empty, not a JSON object,
            or carries none of the expected keys
    """
    if content is None or not content.strip():
        raise RemoteAnalysisError("Empty response from model")

    try:
        data = json.loads(_strip_code_fence(content))
    except json.JSONDecodeError as e:
        raise RemoteAnalysisError(f"Model response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise RemoteAnalysisError(f"Model response is a JSON {type(data).__name__}, not an object")
    if not any(key in data for key in RESPONSE_KEYS):
        raise RemoteAnalysisError("Model response has none of the expected keys")

    summary = data.get("summary")
    return Classification(
        type=_read_choice(data, "type", ISSUE_TYPES, DEFAULT_ISSUE_TYPE),
        priority=_read_choice(data, "priority", PRIORITIES, DEFAULT_PRIORITY),
        topics=_read_topics(data.get("topics")),
        summary=summary if isinstance(summary, str) else DEFAULT_SUMMARY,
    )


class RemoteAnalyzer:
    """Classify issues with an Azure OpenAI chat completion."""

    def __init__(
        self,
        config: RemoteModelConfig,
        classifier: Optional[KeywordClassifier] = None,
        client: Optional[Any] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            config: Remote model settings; api key and endpoint must be set
            classifier: Fallback classifier. Defaults to KeywordClassifier.
            client: Object exposing ``chat.completions.create``. If None,
                an AzureOpenAI client is created on first use.
        """
        self.config = config
        self.classifier = classifier or KeywordClassifier()
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = openai.AzureOpenAI(
                api_key=self.config.api_key,
                azure_endpoint=self.config.endpoint,
                api_version=self.config.resolved_api_version,
                max_retries=0,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        """
        Send a single chat completion request.

        Raises:
            RemoteAnalysisError: If the call fails or the response has no content
        """
        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=0,
            )
        except openai.OpenAIError as e:
            raise RemoteAnalysisError(f"Azure OpenAI request failed: {e}") from e
        except Exception as e:
            logger.exception(f"Unexpected {type(e).__name__} from completion client")
            raise RemoteAnalysisError(f"Azure OpenAI request failed: {e}") from e

        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError) as e:
            raise RemoteAnalysisError(f"Unexpected completion shape: {e}") from e

    def analyze(self, issue_text: str) -> AnalysisResult:
        """
        Classify issue text, falling back to keyword analysis on any failure.

        Args:
            issue_text: Raw issue text

        Returns:
            AnalysisResult whose method records which analyzer produced it
        """
        logger.info(f"Analyzing issue with Azure OpenAI deployment '{self.config.model}'")
        try:
            content = self.complete(build_prompt(issue_text))
            classification = parse_model_response(content)
        except RemoteAnalysisError as e:
            logger.warning(f"Remote analysis failed, falling back to keyword analysis: {e}")
            return AnalysisResult(
                classification=self.classifier.classify(issue_text),
                method=AnalysisMethod.KEYWORD,
            )

        logger.debug(f"Remote classification: {classification}")
        return AnalysisResult(classification=classification, method=AnalysisMethod.AZURE_OPENAI)
