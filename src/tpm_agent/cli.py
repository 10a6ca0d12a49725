# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/cli.py

"""
Command-line entry points for the TPM agent container action.

Every option can be supplied through the matching ``INPUT_*`` environment
variable, which is how GitHub passes action inputs to a container. Both
commands run through the shared action shell, so they always write the
``result`` and ``status`` outputs and exit non-zero on error.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from . import __version__
from .action import ActionOutcome, run_action
from .config import (
    ENV_AZURE_API_KEY,
    ENV_AZURE_API_VERSION,
    ENV_AZURE_DEPLOYMENT,
    ENV_AZURE_ENDPOINT,
    ENV_GITHUB_API_URL,
    ENV_GITHUB_OUTPUT,
    ENV_GITHUB_TOKEN,
    ENV_ISSUE_BODY,
    ENV_ISSUE_NUMBER,
    ENV_OPERATION,
    ENV_REPOSITORY,
    ENV_TARGET,
    ENV_VERBOSE,
    FALLBACK_OUTPUT_PATH,
    RemoteModelConfig,
)
from .exceptions import InvalidInputError
from .github_client import GitHubCommentClient
from .logging_setup import setup_logging
from .pipeline import IssuePipeline
from .tpm import TpmSimulator

app = typer.Typer(
    help="""tpm-agent - Simulated TPM queries and GitHub issue triage

[bold blue]TPM:[/bold blue] tpm
[bold green]Issues:[/bold green] process-issue
""",
    rich_markup_mode="rich"
)

console = Console()

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("tpm-agent")
        except PackageNotFoundError:
            pkg_version = __version__
        console.print(f"tpm-agent version {pkg_version}")
        raise typer.Exit()


def is_truthy(value: Optional[str]) -> bool:
    """Interpret an action input string as a boolean."""
    return bool(value) and value.strip().lower() in TRUE_VALUES


def parse_issue_number(value: Optional[str]) -> int:
    """
    Parse an issue number input.

    Raises:
        InvalidInputError: If missing, not an integer, or not positive
    """
    if value is None or not value.strip():
        raise InvalidInputError("Issue number is required")
    try:
        number = int(value.strip())
    except ValueError:
        raise InvalidInputError(f"Issue number must be an integer, got '{value}'") from None
    if number < 1:
        raise InvalidInputError(f"Issue number must be positive, got {number}")
    return number


def finish(outcome: ActionOutcome) -> None:
    """Report the outcome and exit non-zero on error."""
    if outcome.ok:
        console.print(f"[green]✓[/green] {outcome.result}")
    else:
        console.print(f"[red]✗[/red] {outcome.result}")
        raise typer.Exit(1)


class ConsolePoster:
    """Comment poster used by --dry-run: prints instead of posting."""

    def __init__(self, out: Console):
        self.out = out

    def post_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        self.out.print(Panel(Markdown(body), title=f"{owner}/{repo}#{issue_number} (dry run)"))
        return None


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """tpm-agent - GitHub Action for TPM status and issue triage."""
    setup_logging(debug=debug)


@app.command()
def tpm(
    operation: str = typer.Option("info", "--operation", "-o", envvar=ENV_OPERATION, help="info, check or validate"),
    target: str = typer.Option("", "--target", "-t", envvar=ENV_TARGET, help="Target name"),
    verbose: str = typer.Option(
        "false", "--verbose", envvar=ENV_VERBOSE,
        help="Detailed output when 'true', e.g. --verbose true (action input form)"
    ),
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Detailed output; same as --verbose true"),
    output_file: Optional[Path] = typer.Option(None, "--output-file", envvar=ENV_GITHUB_OUTPUT, help="GitHub output file"),
    fallback_output: Path = typer.Option(FALLBACK_OUTPUT_PATH, "--fallback-output", hidden=True),
) -> None:
    """Run a simulated TPM operation."""
    simulator = TpmSimulator()
    outcome = run_action(
        lambda: simulator.execute(operation, target, detailed or is_truthy(verbose)),
        output_path=output_file,
        fallback_path=fallback_output,
    )
    finish(outcome)


@app.command("process-issue")
def process_issue(
    issue_body: Optional[str] = typer.Option(None, "--issue-body", envvar=ENV_ISSUE_BODY, help="Issue text to analyze"),
    repository: Optional[str] = typer.Option(None, "--repository", "-r", envvar=list(ENV_REPOSITORY), help="Repository as owner/name"),
    issue_number: Optional[str] = typer.Option(None, "--issue-number", "-i", envvar=ENV_ISSUE_NUMBER, help="Issue number"),
    github_token: Optional[str] = typer.Option(None, "--github-token", envvar=list(ENV_GITHUB_TOKEN), help="GitHub token", show_default=False),
    github_api_url: Optional[str] = typer.Option(None, "--github-api-url", envvar=ENV_GITHUB_API_URL, help="GitHub API root"),
    api_key: Optional[str] = typer.Option(None, "--azure-openai-api-key", envvar=ENV_AZURE_API_KEY, show_default=False),
    endpoint: Optional[str] = typer.Option(None, "--azure-openai-endpoint", envvar=ENV_AZURE_ENDPOINT),
    api_version: Optional[str] = typer.Option(None, "--azure-openai-api-version", envvar=ENV_AZURE_API_VERSION),
    deployment_name: Optional[str] = typer.Option(None, "--azure-openai-deployment-name", envvar=ENV_AZURE_DEPLOYMENT),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the comment instead of posting it"),
    output_file: Optional[Path] = typer.Option(None, "--output-file", envvar=ENV_GITHUB_OUTPUT, help="GitHub output file"),
    fallback_output: Path = typer.Option(FALLBACK_OUTPUT_PATH, "--fallback-output", hidden=True),
) -> None:
    """Analyze a GitHub issue and post a triage comment."""

    def use_case() -> str:
        if issue_body is None or not issue_body.strip():
            raise InvalidInputError("Issue body is required")
        if not repository:
            raise InvalidInputError("Repository is required")
        number = parse_issue_number(issue_number)

        poster = ConsolePoster(console) if dry_run else GitHubCommentClient(github_token, base_url=github_api_url)
        remote_config = RemoteModelConfig(
            api_key=api_key,
            endpoint=endpoint,
            api_version=api_version,
            deployment_name=deployment_name,
        )
        context = IssuePipeline(poster, remote_config=remote_config).run(issue_body, repository, number)

        if dry_run:
            return f"Dry run: comment for {context.repository}#{context.issue_number} not posted"
        return f"Comment posted to {context.repository}#{context.issue_number}"

    outcome = run_action(use_case, output_path=output_file, fallback_path=fallback_output)
    finish(outcome)


if __name__ == "__main__":
    app()
