# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import regex

VARIATION_SELECTOR = "\ufe0f"
VARIATION_SELECTOR_HTML = "&#xfe0f;"
VARIATION_SELECTOR_ESCAPE = "\\uFE0F"

HTML_ENTITY = regex.compile(r"&#x([0-9a-fA-F]+);")
HTML_ENTITY_RUN = regex.compile(r"&#x[0-9a-fA-F]+;(?:&#x[0-9a-fA-F]+;)*")
ESCAPE_SEQUENCE = regex.compile(r"\\U([0-9a-fA-F]{8})|\\u([0-9a-fA-F]{4})")


def html_codepoints(value: str) -> list[int] | None:
    """Decodes a run of hex html entities, None if value is not exactly that"""
    if HTML_ENTITY_RUN.fullmatch(value) is None:
        return None

    return [int(hexcode, 16) for hexcode in HTML_ENTITY.findall(value)]


def escape_codepoints(value: str) -> list[int] | None:
    """Decodes a run of \\U######## / \\u#### escapes, None if value is not exactly that"""
    codepoints = []
    position = 0
    for match in ESCAPE_SEQUENCE.finditer(value):
        if match.start() != position:
            return None
        codepoints.append(int(match.group(1) or match.group(2), 16))
        position = match.end()

    if not codepoints or position != len(value):
        return None

    return codepoints


def to_html(character: str) -> str:
    return "".join(f"&#x{ord(c):x};" for c in character)


def to_escape(character: str) -> str:
    # the variation selector keeps its short form, everything else is padded to 8
    return "".join(
        VARIATION_SELECTOR_ESCAPE if c == VARIATION_SELECTOR else f"\\U{ord(c):08X}"
        for c in character
    )


def strip_suffix(value: str, suffix: str) -> str | None:
    """Returns value without a trailing suffix, or None if there is nothing to strip"""
    if len(value) > len(suffix) and value.endswith(suffix):
        return value[: -len(suffix)]
    return None
