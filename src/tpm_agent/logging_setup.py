# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/logging_setup.py

import sys

from loguru import logger


def setup_logging(debug: bool = False) -> None:
    """Setup loguru logging for the action.

    Configures:
    - Console output: INFO+ (DEBUG+ with debug=True), shown in the Actions log
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        format="<level>{level}</level>: {message}",
        colorize=True
    )
    logger.debug("Debug logging enabled")
