# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/action.py

"""
GitHub Action glue shared by every entry point.

A use case is a zero-argument callable returning a result string. The shell
runs it, maps the outcome onto the ``result`` and ``status`` outputs, and
writes them where the runner expects them.
"""

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from .config import FALLBACK_OUTPUT_PATH
from .exceptions import TpmAgentError

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ActionOutcome:
    """Result of one action run."""
    status: str
    result: str

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS


def format_output(name: str, value: str) -> str:
    """Format one output in GITHUB_OUTPUT syntax; multi-line values use a heredoc delimiter."""
    if "\n" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    return f"{name}={value}\n"


def write_outputs(
    outcome: ActionOutcome,
    output_path: Optional[PathLike] = None,
    fallback_path: Optional[PathLike] = FALLBACK_OUTPUT_PATH,
) -> None:
    """
    Write action outputs.

    Args:
        outcome: Outcome to record
        output_path: The runner's GITHUB_OUTPUT file, appended to if given
        fallback_path: File overwritten with the outputs on every run
    """
    text = format_output("result", outcome.result) + format_output("status", outcome.status)

    if fallback_path is not None:
        try:
            Path(fallback_path).write_text(text, encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to write {fallback_path}: {e}")

    if output_path:
        with Path(output_path).open("a", encoding="utf-8") as f:
            f.write(text)
        logger.debug(f"Wrote outputs to {output_path}")


def run_action(
    use_case: Callable[[], str],
    output_path: Optional[PathLike] = None,
    fallback_path: Optional[PathLike] = FALLBACK_OUTPUT_PATH,
) -> ActionOutcome:
    """
    Run a use case and record its outcome as action outputs.

    Args:
        use_case: Callable returning the result string
        output_path: GITHUB_OUTPUT file, if running under Actions
        fallback_path: Local copy of the outputs

    Returns:
        ActionOutcome with status success or error
    """
    try:
        result = use_case()
    except TpmAgentError as e:
        logger.error(f"Error occurred during operation: {e}")
        outcome = ActionOutcome(status=STATUS_ERROR, result=f"Error: {e}")
    except Exception as e:
        logger.exception("Unexpected error occurred during operation")
        outcome = ActionOutcome(status=STATUS_ERROR, result=f"Error: {e}")
    else:
        logger.info(f"Operation completed successfully: {result}")
        outcome = ActionOutcome(status=STATUS_SUCCESS, result=result)

    write_outputs(outcome, output_path=output_path, fallback_path=fallback_path)
    return outcome
