# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> {level:7} | {name:22} > {message}"


def setup_logging(level: str = "INFO"):
    """Replaces any configured sinks with a single stderr sink.

    Raises ValueError for an unknown level, leaving the current sinks in place.
    """
    level = level.upper()
    logger.level(level)

    logger.remove()
    logger.enable("emojiformat")
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
