# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/github_client.py

"""
GitHub API client for posting issue comments.
"""

from typing import Optional

from github import Auth, Github, GithubException, RateLimitExceededException
from loguru import logger

from .exceptions import InvalidInputError, PostingError


def _reason_for(error: GithubException) -> str:
    if isinstance(error, RateLimitExceededException):
        return "rate limited"
    status_reasons = {
        401: "unauthorized",
        403: "forbidden",
        404: "not found",
        410: "gone",
        422: "unprocessable",
    }
    if error.status in status_reasons:
        return status_reasons[error.status]
    data = error.data if isinstance(error.data, dict) else {}
    return data.get("message") or f"HTTP {error.status}"


class GitHubCommentClient:
    """Post comments to GitHub issues."""

    def __init__(self, token: Optional[str], base_url: Optional[str] = None, client: Optional[Github] = None):
        """
        Initialize GitHub client.

        Args:
            token: GitHub API token
            base_url: API root for GitHub Enterprise; None for github.com
            client: Preconfigured PyGithub client, mainly for tests

        Raises:
            InvalidInputError: If no token is given
        """
        if client is None:
            if not token:
                raise InvalidInputError("GitHub token is required to post comments")
            kwargs = {"auth": Auth.Token(token)}
            if base_url:
                kwargs["base_url"] = base_url
            client = Github(**kwargs)
        self.client = client

    def post_comment(self, owner: str, repo: str, issue_number: int, body: str) -> str:
        """
        Post a comment to a GitHub issue.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: GitHub issue number
            body: Comment text to post

        Returns:
            URL of the created comment

        Raises:
            PostingError: If the comment cannot be posted
        """
        full_name = f"{owner}/{repo}"
        try:
            issue = self.client.get_repo(full_name, lazy=True).get_issue(issue_number)
            comment = issue.create_comment(body)
        except GithubException as e:
            reason = _reason_for(e)
            raise PostingError(
                f"Failed to post comment to {full_name}#{issue_number}: {reason}",
                status=e.status,
                reason=reason,
            ) from e

        logger.info(f"Posted comment to {full_name}#{issue_number}")
        return comment.html_url
