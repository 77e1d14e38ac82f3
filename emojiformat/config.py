# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import os
from pathlib import Path

from loguru import logger


class Settings:
    def __init__(self):
        self.EMOJIFORMAT_DATA_PATH: str = ""
        self.EMOJIFORMAT_LOG_LEVEL: str = "INFO"

        for name, default in list(self.__dict__.items()):
            value = os.environ.get(name)
            if not value:
                logger.debug(f'No value set for env variable "{name}", using "{default}"')
                continue

            setattr(self, name, value)

    @property
    def data_path(self) -> Path | None:
        """Alternative emoji map to load instead of the bundled one"""
        return Path(self.EMOJIFORMAT_DATA_PATH) if self.EMOJIFORMAT_DATA_PATH else None

    @property
    def log_level(self) -> str:
        return self.EMOJIFORMAT_LOG_LEVEL.upper()
