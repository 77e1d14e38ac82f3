# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

from typing import TYPE_CHECKING

import regex
from loguru import logger

from emojiformat.codepoints import HTML_ENTITY_RUN
from emojiformat.exceptions import InvalidFormat, NotFound

if TYPE_CHECKING:
    from emojiformat.resolver import EmojiConverter, Format

SHORTCODE_PATTERN = regex.compile(r":[a-zA-Z_]+:")


def transform_text(converter: "EmojiConverter", text: str, target_format: "Format | str") -> str:
    """Rewrites every recognized emoji in the text to the target format.

    Runs three passes, each over the output of the previous one: literal
    characters, then :shortcodes:, then runs of html entities. Anything that
    fails to convert is logged and left as it was, so this never raises.
    Escape sequences inside running text are not detected.
    """

    def replacer(index: dict[str, str], kind: str):
        def replace(match: regex.Match) -> str:
            found = match.group(0)
            name = index.get(found)
            if name is None:
                return found
            try:
                return converter.transform(name, target_format)
            except (NotFound, InvalidFormat) as e:
                logger.warning(f"Transformation for {kind} {found!r} ({name}) failed: {e}")
                return found

        return replace

    result = text
    if converter.index.literal is not None:
        result = converter.index.literal.sub(replacer(converter.index.emoji, "emoji"), result)
    result = SHORTCODE_PATTERN.sub(replacer(converter.index.shortcode, "shortcode"), result)
    result = HTML_ENTITY_RUN.sub(replacer(converter.index.html, "html"), result)

    return result
