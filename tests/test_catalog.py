import orjson
import pytest

from emojiformat import CatalogError, EmojiCatalog, EmojiRecord, load_catalog
from emojiformat.catalog import DATA_PATH


def write_map(path, data):
    path.write_bytes(orjson.dumps(data))
    return path


def test_bundled_catalog_loads(catalog):
    assert len(catalog) > 200
    for name in ["smile", "heart", "fire", "microphone", "rainbow", "thumbs_up", "flag_it"]:
        assert name in catalog


def test_bundled_records_are_consistent(catalog):
    for record in catalog:
        record.validate()
        assert catalog.get(record.name) is record


def test_bundled_catalog_keeps_file_order(catalog):
    names = list(orjson.loads(DATA_PATH.read_bytes()))
    assert catalog.names() == names


def test_record_from_emoji():
    record = EmojiRecord.from_emoji("microphone", "\U0001f399\ufe0f")
    assert record.shortcode == ":microphone:"
    assert record.html == "&#x1f399;&#xfe0f;"
    assert record.unicode == "\\U0001F399\\uFE0F"


def test_record_as_dict():
    record = EmojiRecord.from_emoji("smile", "\U0001f604")
    assert record.as_dict() == {
        "name": "smile",
        "emoji": "\U0001f604",
        "shortcode": ":smile:",
        "html": "&#x1f604;",
        "unicode": "\\U0001F604",
    }


def test_records_are_immutable():
    record = EmojiRecord.from_emoji("smile", "\U0001f604")
    with pytest.raises(AttributeError):
        record.name = "grin"


@pytest.mark.parametrize(
    "record, message",
    [
        (EmojiRecord("smile", "", ":smile:", "&#x1f604;", "\\U0001F604"), "empty"),
        (EmojiRecord("smile", "\U0001f604", "smile", "&#x1f604;", "\\U0001F604"), "shortcode"),
        (EmojiRecord("smile", "\U0001f604", "::", "&#x1f604;", "\\U0001F604"), "shortcode"),
        (EmojiRecord("smile", "\U0001f604", ":smile:", "&#x1f609;", "\\U0001F604"), "html"),
        (EmojiRecord("smile", "\U0001f604", ":smile:", "&#x1f604;", "\\U0001F609"), "unicode"),
        (EmojiRecord("smile", "\U0001f604", ":smile:", "&#x1f604;", "U0001F604"), "unicode"),
    ],
)
def test_invalid_record(record, message):
    with pytest.raises(CatalogError, match=message):
        EmojiCatalog([record])


def test_duplicate_name():
    with pytest.raises(CatalogError, match="duplicate name"):
        EmojiCatalog(
            [
                EmojiRecord.from_emoji("smile", "\U0001f604"),
                EmojiRecord.from_emoji("smile", "\U0001f609"),
            ]
        )


def test_duplicate_character():
    with pytest.raises(CatalogError, match="already used by 'smile'"):
        EmojiCatalog(
            [
                EmojiRecord.from_emoji("smile", "\U0001f604"),
                EmojiRecord.from_emoji("grin", "\U0001f604"),
            ]
        )


def test_duplicate_shortcode():
    with pytest.raises(CatalogError, match="shortcode"):
        EmojiCatalog(
            [
                EmojiRecord.from_emoji("smile", "\U0001f604"),
                EmojiRecord.from_emoji("wink", "\U0001f609", shortcode=":smile:"),
            ]
        )


def test_catalog_lookup(small_catalog):
    assert "smile" in small_catalog
    assert "wink" not in small_catalog
    assert small_catalog.get("wink") is None
    assert small_catalog.get("hundred").shortcode == ":100:"
    assert small_catalog.names() == ["smile", "heart", "microphone", "hundred"]


def test_load_custom_map(tmp_path):
    path = write_map(
        tmp_path / "map.json",
        {
            "smile": {
                "emoji": "\U0001f604",
                "shortcode": ":smile:",
                "html": "&#x1f604;",
                "unicode": "\\U0001F604",
            }
        },
    )
    catalog = load_catalog(path)
    assert catalog.names() == ["smile"]


def test_load_missing_file(tmp_path):
    with pytest.raises(CatalogError, match="could not read"):
        load_catalog(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "map.json"
    path.write_text("{not json")
    with pytest.raises(CatalogError, match="could not read"):
        load_catalog(path)


def test_load_not_an_object(tmp_path):
    path = write_map(tmp_path / "map.json", ["smile"])
    with pytest.raises(CatalogError, match="json object"):
        load_catalog(path)


def test_load_entry_missing_field(tmp_path):
    path = write_map(
        tmp_path / "map.json",
        {"smile": {"emoji": "\U0001f604", "shortcode": ":smile:", "html": "&#x1f604;"}},
    )
    with pytest.raises(CatalogError, match="smile: malformed entry"):
        load_catalog(path)


def test_load_entry_wrong_type(tmp_path):
    path = write_map(tmp_path / "map.json", {"smile": "\U0001f604"})
    with pytest.raises(CatalogError, match="malformed entry"):
        load_catalog(path)
