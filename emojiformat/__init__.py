# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

"""Convert emoji between names, characters, shortcodes, html entities and escapes.

    >>> import emojiformat
    >>> emojiformat.transform("smile", emojiformat.Format.EMOJI)
    '😄'
    >>> emojiformat.transform_text("happy 😄", "shortcode")
    'happy :smile:'
"""

import threading

from loguru import logger

from emojiformat.catalog import EmojiCatalog, EmojiRecord, load_catalog
from emojiformat.config import Settings
from emojiformat.exceptions import CatalogError, EmojiFormatError, InvalidFormat, NotFound
from emojiformat.resolver import EmojiConverter, Format, FormatIndex

logger.disable("emojiformat")

__all__ = [
    "CatalogError",
    "EmojiCatalog",
    "EmojiConverter",
    "EmojiFormatError",
    "EmojiRecord",
    "Format",
    "FormatIndex",
    "InvalidFormat",
    "NotFound",
    "Settings",
    "get_converter",
    "get_info",
    "is_supported",
    "list_supported",
    "load_catalog",
    "transform",
    "transform_text",
]

_converter: EmojiConverter | None = None
_converter_lock = threading.Lock()


def get_converter() -> EmojiConverter:
    """Returns the shared converter, building it on first use"""
    global _converter
    if _converter is None:
        with _converter_lock:
            if _converter is None:
                _converter = EmojiConverter(load_catalog(Settings().data_path))
    return _converter


def transform(value: str, target_format: Format | str) -> str:
    return get_converter().transform(value, target_format)


def transform_text(text: str, target_format: Format | str) -> str:
    return get_converter().transform_text(text, target_format)


def get_info(value: str) -> EmojiRecord:
    return get_converter().get_info(value)


def list_supported() -> list[str]:
    return get_converter().list_supported()


def is_supported(value: str) -> bool:
    return get_converter().is_supported(value)
