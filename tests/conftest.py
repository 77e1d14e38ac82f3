import pytest
from loguru import logger

from emojiformat import EmojiCatalog, EmojiConverter, EmojiRecord, load_catalog


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture(scope="session")
def converter(catalog):
    return EmojiConverter(catalog)


@pytest.fixture
def small_catalog():
    return EmojiCatalog(
        [
            EmojiRecord.from_emoji("smile", "\U0001f604"),
            EmojiRecord.from_emoji("heart", "\u2764\ufe0f"),
            EmojiRecord.from_emoji("microphone", "\U0001f399\ufe0f"),
            EmojiRecord.from_emoji("hundred", "\U0001f4af", shortcode=":100:"),
        ]
    )


@pytest.fixture
def caplog(caplog):
    """Lets pytest's caplog see messages logged through loguru"""
    logger.enable("emojiformat")
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)
    logger.disable("emojiformat")
