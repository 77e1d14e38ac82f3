# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator

import orjson
from loguru import logger

from emojiformat import codepoints
from emojiformat.exceptions import CatalogError

DATA_PATH = Path(__file__).parent / "data" / "emoji_map.json"

# record fields that must be unique across the whole catalog
KEY_FIELDS = ("emoji", "shortcode", "html", "unicode")


@dataclass(frozen=True)
class EmojiRecord:
    name: str
    emoji: str
    shortcode: str
    html: str
    unicode: str

    @classmethod
    def from_emoji(cls, name: str, emoji: str, shortcode: str | None = None):
        """Builds a record by encoding the given character"""
        return cls(
            name=name,
            emoji=emoji,
            shortcode=shortcode or f":{name}:",
            html=codepoints.to_html(emoji),
            unicode=codepoints.to_escape(emoji),
        )

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    def validate(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, str) or not value:
                raise CatalogError(f"field '{field.name}' is empty", self.name)

        if len(self.shortcode) < 3 or not (
            self.shortcode.startswith(":") and self.shortcode.endswith(":")
        ):
            raise CatalogError(f"shortcode {self.shortcode!r} is not of the form :name:", self.name)

        expected = [ord(c) for c in self.emoji]
        if codepoints.html_codepoints(self.html) != expected:
            raise CatalogError(f"html {self.html!r} does not encode {self.emoji!r}", self.name)
        if codepoints.escape_codepoints(self.unicode) != expected:
            raise CatalogError(f"unicode {self.unicode!r} does not encode {self.emoji!r}", self.name)


class EmojiCatalog:
    """Read-only table of emoji records keyed by canonical name"""

    def __init__(self, records: Iterable[EmojiRecord]):
        table: dict[str, EmojiRecord] = {}
        owners: dict[str, dict[str, str]] = {key: {} for key in KEY_FIELDS}
        for record in records:
            record.validate()
            if record.name in table:
                raise CatalogError("duplicate name", record.name)

            for key in KEY_FIELDS:
                value = getattr(record, key)
                owner = owners[key].get(value)
                if owner is not None:
                    raise CatalogError(f"{key} {value!r} is already used by '{owner}'", record.name)
                owners[key][value] = record.name

            table[record.name] = record

        self._records = MappingProxyType(table)

    def __contains__(self, name) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[EmojiRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def get(self, name: str) -> EmojiRecord | None:
        return self._records.get(name)

    def names(self) -> list[str]:
        return list(self._records)


def load_catalog(path: str | Path | None = None) -> EmojiCatalog:
    """Loads and validates a json emoji map, defaulting to the bundled dataset"""
    path = Path(path) if path is not None else DATA_PATH
    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as e:
        raise CatalogError(f"could not read emoji data from {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"emoji data in {path} must be a json object")

    records = []
    for name, entry in data.items():
        try:
            records.append(
                EmojiRecord(
                    name=name,
                    emoji=entry["emoji"],
                    shortcode=entry["shortcode"],
                    html=entry["html"],
                    unicode=entry["unicode"],
                )
            )
        except (KeyError, TypeError) as e:
            raise CatalogError(f"malformed entry, missing {e}", name) from e

    catalog = EmojiCatalog(records)
    logger.debug(f"Loaded {len(catalog)} emojis from {path}")
    return catalog
