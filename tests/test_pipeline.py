# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_pipeline.py

"""
Tests for the analyze -> compose -> post issue pipeline.
"""

from unittest.mock import MagicMock

import pydantic
import pytest

from tpm_agent.analysis.remote import RemoteAnalyzer
from tpm_agent.config import RemoteModelConfig
from tpm_agent.exceptions import InvalidInputError, InvalidRepositoryError, PostingError
from tpm_agent.models import AnalysisMethod, PipelineStage
from tpm_agent.pipeline import IssuePipeline, parse_repository

from tests.fixtures.fakes import RecordingPoster, make_completion_client


class TestParseRepository:
    def test_valid(self):
        assert parse_repository("octo/widgets") == ("octo", "widgets")

    @pytest.mark.parametrize("repository", ["ownerrepo", "", "/repo", "owner/", "a/b/c", "/"])
    def test_invalid(self, repository):
        with pytest.raises(InvalidRepositoryError):
            parse_repository(repository)

    def test_is_invalid_input(self):
        with pytest.raises(InvalidInputError, match="ownerrepo"):
            parse_repository("ownerrepo")


class TestKeywordMode:
    def test_critical_docker_bug(self, poster):
        text = "This is a critical bug in the Docker container"
        context = IssuePipeline(poster).run(text, "octo/widgets", 12)

        c = context.analysis.classification
        assert (c.type, c.priority, c.topics, c.summary) == ("bug", "high", ("Docker", "Container"), text)
        assert context.analysis.method is AnalysisMethod.KEYWORD
        assert "Reproduce the problem" in context.comment
        assert "**Docker**:" in context.comment

        assert poster.calls == [("octo", "widgets", 12, context.comment)]
        assert context.stage is PipelineStage.DONE
        assert context.comment_url == poster.url

    def test_empty_issue_text(self, poster):
        context = IssuePipeline(poster).run("", "octo/widgets", 1)
        c = context.analysis.classification
        assert (c.type, c.priority, c.topics, c.summary) == ("question", "medium", (), "")
        assert len(poster.calls) == 1

    def test_incomplete_remote_config_uses_keywords(self, poster):
        config = RemoteModelConfig(api_key="key-only")
        analyzer = MagicMock(spec=RemoteAnalyzer)
        context = IssuePipeline(poster, remote_config=config, remote_analyzer=analyzer).run(
            "question", "octo/widgets", 1
        )
        analyzer.analyze.assert_not_called()
        assert context.analysis.method is AnalysisMethod.KEYWORD


class TestRemoteMode:
    def test_remote_classification_used(self, poster, remote_config):
        client = make_completion_client(
            '{"type":"feature","priority":"low","topics":["Security"],"summary":"Add new feature"}'
        )
        analyzer = RemoteAnalyzer(remote_config, client=client)
        context = IssuePipeline(poster, remote_config=remote_config, remote_analyzer=analyzer).run(
            "Could we get audit logging?", "octo/widgets", 7
        )

        c = context.analysis.classification
        assert (c.type, c.priority, c.topics, c.summary) == ("feature", "low", ("Security",), "Add new feature")
        head = context.comment.split("### Analysis Results")[0]
        assert "Azure OpenAI" in head

    def test_remote_failure_does_not_fail_pipeline(self, poster, remote_config):
        analyzer = RemoteAnalyzer(remote_config, client=make_completion_client("oops"))
        context = IssuePipeline(poster, remote_config=remote_config, remote_analyzer=analyzer).run(
            "critical bug", "octo/widgets", 7
        )
        assert context.analysis.method is AnalysisMethod.KEYWORD
        assert "analyzed using **keyword analysis**" in context.comment
        assert context.stage is PipelineStage.DONE


class TestFailures:
    def test_bad_repository_fails_before_any_call(self, remote_config):
        poster = RecordingPoster()
        analyzer = MagicMock(spec=RemoteAnalyzer)
        pipeline = IssuePipeline(poster, remote_config=remote_config, remote_analyzer=analyzer)

        with pytest.raises(InvalidRepositoryError):
            pipeline.run("critical bug", "ownerrepo", 3)

        assert poster.calls == []
        analyzer.analyze.assert_not_called()

    def test_posting_error_propagates(self):
        error = PostingError("Failed to post comment", status=404, reason="not found")
        poster = RecordingPoster(error=error)

        with pytest.raises(PostingError) as exc_info:
            IssuePipeline(poster).run("bug", "octo/widgets", 3)

        assert exc_info.value is error
        assert len(poster.calls) == 1


class TestContext:
    def test_steps_return_new_contexts(self, poster):
        pipeline = IssuePipeline(poster)
        start = pipeline.start("a bug", "octo/widgets", 5)
        analyzed = pipeline.analyze(start)
        composed = pipeline.compose(analyzed)

        assert start.stage is PipelineStage.START
        assert start.analysis is None
        assert analyzed.stage is PipelineStage.ANALYZING
        assert analyzed.comment is None
        assert composed.stage is PipelineStage.COMPOSING
        assert composed.comment
        assert poster.calls == []

    def test_context_is_frozen(self, poster):
        context = IssuePipeline(poster).start("text", "octo/widgets", 5)
        with pytest.raises(pydantic.ValidationError):
            context.issue_text = "changed"

    def test_topics_cannot_change_in_place(self, poster):
        context = IssuePipeline(poster).run("docker container bug", "octo/widgets", 5)
        topics = context.analysis.classification.topics

        assert isinstance(topics, tuple)
        with pytest.raises(AttributeError):
            topics.append("TPM")
        assert context.analysis.classification.topics == ("Docker", "Container")

    def test_prepare_does_not_post(self, poster):
        context = IssuePipeline(poster).prepare("text", "octo/widgets", 5)
        assert context.comment
        assert poster.calls == []
