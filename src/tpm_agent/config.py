# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/config.py

"""
Configuration for the TPM agent.

Values arrive as GitHub Action inputs (``INPUT_*`` environment variables)
through the CLI options; this module holds their names and defaults.
"""

from pathlib import Path
from typing import Final, Optional

from pydantic import BaseModel, ConfigDict


# ---- Constants ----

DEFAULT_DEPLOYMENT_NAME: Final = "gpt-4"
DEFAULT_API_VERSION: Final = "2024-02-01"
FALLBACK_OUTPUT_PATH: Final = Path("/tmp/github_output.txt")

ENV_OPERATION: Final = "INPUT_OPERATION"
ENV_TARGET: Final = "INPUT_TARGET"
ENV_VERBOSE: Final = "INPUT_VERBOSE"
ENV_ISSUE_BODY: Final = "INPUT_ISSUE_BODY"
ENV_REPOSITORY: Final = ("INPUT_REPOSITORY", "GITHUB_REPOSITORY")
ENV_ISSUE_NUMBER: Final = "INPUT_ISSUE_NUMBER"
ENV_GITHUB_TOKEN: Final = ("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN")
ENV_AZURE_API_KEY: Final = "INPUT_AZURE_OPENAI_API_KEY"
ENV_AZURE_ENDPOINT: Final = "INPUT_AZURE_OPENAI_ENDPOINT"
ENV_AZURE_API_VERSION: Final = "INPUT_AZURE_OPENAI_API_VERSION"
ENV_AZURE_DEPLOYMENT: Final = "INPUT_AZURE_OPENAI_DEPLOYMENT_NAME"
ENV_GITHUB_OUTPUT: Final = "GITHUB_OUTPUT"
ENV_GITHUB_API_URL: Final = "GITHUB_API_URL"


class RemoteModelConfig(BaseModel):
    """Azure OpenAI connection settings; all fields optional."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    endpoint: Optional[str] = None
    api_version: Optional[str] = None
    deployment_name: Optional[str] = None

    @property
    def enabled(self) -> bool:
        """Remote analysis runs only when both key and endpoint are set."""
        return bool(self.api_key) and bool(self.endpoint)

    @property
    def model(self) -> str:
        return self.deployment_name or DEFAULT_DEPLOYMENT_NAME

    @property
    def resolved_api_version(self) -> str:
        return self.api_version or DEFAULT_API_VERSION

    def __repr__(self) -> str:
        # Never print the key
        return (
            f"RemoteModelConfig(endpoint={self.endpoint}, model={self.model}, "
            f"enabled={self.enabled})"
        )
