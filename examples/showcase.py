# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import emojiformat
from emojiformat import Format


def basic_transformations():
    print(f"   smile -> {emojiformat.transform('smile', Format.EMOJI)}")
    print(f"   😄 -> {emojiformat.transform('😄', Format.SHORTCODE)}")
    print(f"   heart -> {emojiformat.transform('heart', Format.HTML)}")
    print(f"   🔥 -> {emojiformat.transform('🔥', Format.UNICODE)}")


def text_processing():
    text = "Hello 😊 I'm :heart: coding! &#x1f525;"
    shortcodes = emojiformat.transform_text(text, Format.SHORTCODE)
    print(f"   Original: {text}")
    print(f"   Shortcodes: {shortcodes}")
    print(f"   Back to emojis: {emojiformat.transform_text(shortcodes, Format.EMOJI)}")


def emoji_information():
    for value in ["rocket", "😊", ":coffee:", "&#x1f308;"]:
        try:
            record = emojiformat.get_info(value)
        except emojiformat.NotFound as e:
            print(f"   {value}: Error - {e}")
            continue

        print(f"   Input: {value}")
        for field, encoded in record.as_dict().items():
            print(f"     {field}: {encoded}")


def emoji_validation():
    for value in ["smile", "invalid_emoji", "heart", "❤️", ":nonexistent:", "🚀"]:
        if emojiformat.is_supported(value):
            print(f"   ✓ {value} -> {emojiformat.transform(value, Format.EMOJI)}")
        else:
            print(f"   ✗ {value} (not supported)")

    print(f"   Total supported emojis: {len(emojiformat.list_supported())}")


def web_development():
    content = "Welcome to our site! 😊 We hope you enjoy your stay! ⭐"
    print(f"   HTML-safe: {emojiformat.transform_text(content, Format.HTML)}")

    post = "Just deployed my app! 🚀 So excited! 🎉"
    stored = emojiformat.transform_text(post, Format.SHORTCODE)
    print(f"   Store in DB: {stored}")
    print(f"   Display to user: {emojiformat.transform_text(stored, Format.EMOJI)}")


def round_trips():
    for name in ["heart", "fire", "rocket", "coffee", "pizza"]:
        first = emojiformat.transform(name, Format.EMOJI)
        shortcode = emojiformat.transform(first, Format.SHORTCODE)
        second = emojiformat.transform(shortcode, Format.EMOJI)
        mark = "✓" if first == second else "✗"
        print(f"   {mark} {name}: {first} -> {shortcode} -> {second}")


if __name__ == "__main__":
    sections = [
        ("Basic Emoji Transformations", basic_transformations),
        ("Text Processing", text_processing),
        ("Emoji Information", emoji_information),
        ("Emoji Validation", emoji_validation),
        ("Web Development Use Cases", web_development),
        ("Round Trips", round_trips),
    ]
    for number, (title, section) in enumerate(sections, start=1):
        print(f"\n{number}. {title}:")
        section()
