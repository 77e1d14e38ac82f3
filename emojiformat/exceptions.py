# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0


class EmojiFormatError(Exception):
    pass


class NotFound(EmojiFormatError, LookupError):
    def __init__(self, value: str):
        super().__init__(f"emoji not found or not supported: {value!r}")
        self.value = value


class InvalidFormat(EmojiFormatError, ValueError):
    def __init__(self, value, valid: list[str]):
        super().__init__(
            f"invalid target format: {value!r}. Valid formats: {', '.join(valid)}"
        )
        self.value = value
        self.valid = valid


class CatalogError(EmojiFormatError):
    def __init__(self, message, name: str | None = None):
        super().__init__(message if name is None else f"{name}: {message}")
        self.name = name
