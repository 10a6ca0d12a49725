# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the tpm_agent test suite.
"""

import sys

import pytest
from loguru import logger

from tpm_agent.config import RemoteModelConfig
from tests.fixtures.fakes import RecordingPoster


@pytest.fixture(autouse=True)
def reset_loguru():
    """Restore the default loguru handler; CLI runs rebind it to captured streams."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def poster():
    return RecordingPoster()


@pytest.fixture
def remote_config():
    return RemoteModelConfig(
        api_key="test-key",
        endpoint="https://example.openai.azure.com",
        api_version="2024-02-01",
        deployment_name="triage",
    )
