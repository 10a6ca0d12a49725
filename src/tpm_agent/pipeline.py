# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/pipeline.py

"""
Issue processing pipeline: analyze, compose, post.

Stages run strictly in order (start -> analyzing -> composing -> posting ->
done). A bad repository identifier fails before any network call; a posting
failure propagates to the caller. Analysis cannot fail the pipeline because
the remote analyzer falls back to keyword classification.
"""

from typing import Optional, Protocol, Tuple

from loguru import logger

from .analysis.classifier import KeywordClassifier
from .analysis.remote import RemoteAnalyzer
from .config import RemoteModelConfig
from .exceptions import InvalidRepositoryError
from .models import AnalysisMethod, AnalysisResult, PipelineContext, PipelineStage
from .responses.composer import CommentComposer


class CommentPoster(Protocol):
    """Anything that can post a comment to an issue."""

    def post_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Optional[str]:
        ...


def parse_repository(repository: str) -> Tuple[str, str]:
    """
    Split an 'owner/name' repository identifier.

    Raises:
        InvalidRepositoryError: Unless there are exactly two non-empty segments
    """
    parts = repository.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidRepositoryError(repository)
    return parts[0], parts[1]


class IssuePipeline:
    """Analyze one issue, compose a comment and post it."""

    def __init__(
        self,
        poster: CommentPoster,
        remote_config: Optional[RemoteModelConfig] = None,
        classifier: Optional[KeywordClassifier] = None,
        composer: Optional[CommentComposer] = None,
        remote_analyzer: Optional[RemoteAnalyzer] = None,
    ):
        self.poster = poster
        self.remote_config = remote_config or RemoteModelConfig()
        self.classifier = classifier or KeywordClassifier()
        self.composer = composer or CommentComposer()
        self._remote_analyzer = remote_analyzer

    @property
    def remote_enabled(self) -> bool:
        return self.remote_config.enabled

    def _analyzer(self) -> RemoteAnalyzer:
        if self._remote_analyzer is None:
            self._remote_analyzer = RemoteAnalyzer(self.remote_config, classifier=self.classifier)
        return self._remote_analyzer

    def start(self, issue_text: str, repository: str, issue_number: int) -> PipelineContext:
        """Validate inputs and build the initial context."""
        owner, repo = parse_repository(repository)
        return PipelineContext(
            issue_text=issue_text,
            owner=owner,
            repo=repo,
            issue_number=issue_number,
        )

    def analyze(self, context: PipelineContext) -> PipelineContext:
        context = context.model_copy(update={"stage": PipelineStage.ANALYZING})
        if self.remote_enabled:
            analysis = self._analyzer().analyze(context.issue_text)
        else:
            logger.info("Azure OpenAI not configured, using keyword analysis")
            analysis = AnalysisResult(
                classification=self.classifier.classify(context.issue_text),
                method=AnalysisMethod.KEYWORD,
            )
        c = analysis.classification
        logger.info(
            f"Classified {context.repository}#{context.issue_number} as "
            f"{c.type}/{c.priority} via {analysis.method.label}"
        )
        return context.model_copy(update={"analysis": analysis})

    def compose(self, context: PipelineContext) -> PipelineContext:
        context = context.model_copy(update={"stage": PipelineStage.COMPOSING})
        comment = self.composer.compose(context.analysis, context.issue_text)
        return context.model_copy(update={"comment": comment})

    def post(self, context: PipelineContext) -> PipelineContext:
        context = context.model_copy(update={"stage": PipelineStage.POSTING})
        logger.info(f"Posting comment to {context.repository}#{context.issue_number}")
        url = self.poster.post_comment(context.owner, context.repo, context.issue_number, context.comment)
        return context.model_copy(update={"comment_url": url, "stage": PipelineStage.DONE})

    def prepare(self, issue_text: str, repository: str, issue_number: int) -> PipelineContext:
        """Run analysis and composition without posting."""
        context = self.start(issue_text, repository, issue_number)
        return self.compose(self.analyze(context))

    def run(self, issue_text: str, repository: str, issue_number: int) -> PipelineContext:
        """
        Process one issue end to end.

        Args:
            issue_text: Raw issue text
            repository: Repository identifier in 'owner/name' form
            issue_number: Issue number within the repository

        Returns:
            Final context in the DONE stage

        Raises:
            InvalidRepositoryError: If the repository identifier is malformed
            PostingError: If the comment cannot be posted
        """
        return self.post(self.prepare(issue_text, repository, issue_number))
