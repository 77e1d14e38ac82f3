# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

from enum import Enum

import regex
from loguru import logger

from emojiformat import text
from emojiformat.catalog import EmojiCatalog, EmojiRecord
from emojiformat.codepoints import (
    VARIATION_SELECTOR,
    VARIATION_SELECTOR_ESCAPE,
    VARIATION_SELECTOR_HTML,
    strip_suffix,
)
from emojiformat.exceptions import InvalidFormat, NotFound


class Format(str, Enum):
    EMOJI = "emoji"
    SHORTCODE = "shortcode"
    HTML = "html"
    UNICODE = "unicode"

    @classmethod
    def parse(cls, value) -> "Format":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidFormat(value, [f.value for f in cls]) from None


class FormatIndex:
    """Reverse lookups from every encoding of an emoji back to its name.

    Emoji that end in a variation selector are also reachable through their
    base forms (the selector removed) and, for html, through the hybrid form
    where the selector is the literal character. Canonical keys are all
    registered first, after which synthetic keys are added in catalog order
    and the first one to claim a key keeps it.
    """

    def __init__(self, catalog: EmojiCatalog):
        self.emoji: dict[str, str] = {}
        self.shortcode: dict[str, str] = {}
        self.html: dict[str, str] = {}
        self.unicode: dict[str, str] = {}
        # (key, name that kept it, name that was dropped)
        self.dropped: list[tuple[str, str, str]] = []

        for record in catalog:
            self.emoji[record.emoji] = record.name
            self.shortcode[record.shortcode] = record.name
            self.html[record.html] = record.name
            self.unicode[record.unicode] = record.name

        for record in catalog:
            html_base = strip_suffix(record.html, VARIATION_SELECTOR_HTML)
            if html_base is not None:
                self._add_synthetic(self.html, html_base, record.name)
                self._add_synthetic(self.html, html_base + VARIATION_SELECTOR, record.name)

            unicode_base = strip_suffix(record.unicode, VARIATION_SELECTOR_ESCAPE)
            if unicode_base is not None:
                self._add_synthetic(self.unicode, unicode_base, record.name)

        # longest characters first, scanned left to right in a single pass
        by_length = sorted(catalog, key=lambda r: len(r.emoji), reverse=True)
        self.literal = None
        if by_length:
            self.literal = regex.compile("|".join(regex.escape(r.emoji) for r in by_length))

    def _add_synthetic(self, index: dict[str, str], key: str, name: str):
        owner = index.setdefault(key, name)
        if owner != name:
            logger.debug(f"Dropped derived key {key!r} of '{name}', already taken by '{owner}'")
            self.dropped.append((key, owner, name))


class EmojiConverter:
    def __init__(self, catalog: EmojiCatalog):
        self.catalog = catalog
        self.index = FormatIndex(catalog)

    def find_name(self, value: str) -> str | None:
        """Works out which emoji the value denotes, in any of the supported formats"""
        value = value.strip()

        if value in self.catalog:
            return value

        for index in (self.index.emoji, self.index.shortcode, self.index.html):
            name = index.get(value)
            if name is not None:
                return name

        # html entity followed by the literal variation selector
        if "&#x" in value and value.endswith(VARIATION_SELECTOR):
            name = self.index.html.get(value[: -len(VARIATION_SELECTOR)] + VARIATION_SELECTOR_HTML)
            if name is not None:
                return name

        name = self.index.unicode.get(value)
        if name is not None:
            return name

        # bare name used as a shortcode
        return self.index.shortcode.get(f":{value}:")

    def resolve(self, value: str) -> EmojiRecord:
        name = self.find_name(value)
        if name is None:
            raise NotFound(value)
        return self.catalog.get(name)

    def transform(self, value: str, target_format: Format | str) -> str:
        target_format = Format.parse(target_format)
        record = self.resolve(value)
        return getattr(record, target_format.value)

    def transform_text(self, content: str, target_format: Format | str) -> str:
        return text.transform_text(self, content, target_format)

    def get_info(self, value: str) -> EmojiRecord:
        return self.resolve(value)

    def list_supported(self) -> list[str]:
        return self.catalog.names()

    def is_supported(self, value: str) -> bool:
        return self.find_name(value) is not None
