# SPDX-FileCopyrightText: 2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import sys
from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv

from emojiformat.catalog import load_catalog
from emojiformat.config import Settings
from emojiformat.exceptions import CatalogError, NotFound
from emojiformat.log import setup_logging
from emojiformat.resolver import EmojiConverter, Format

FORMAT_CHOICE = click.Choice([f.value for f in Format], case_sensitive=False)


def format_option(default: str):
    return click.option(
        "-f",
        "--format",
        "target_format",
        type=FORMAT_CHOICE,
        default=default,
        show_default=True,
        help="Format to convert to.",
    )


@click.group()
@click.option("--log-level", default=None, help="Overrides EMOJIFORMAT_LOG_LEVEL.")
@click.option(
    "--data",
    "data_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Emoji map to use instead of the bundled one.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, data_path: Path | None):
    """Convert emoji between names, characters, shortcodes, html entities and escapes."""
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings()
    try:
        setup_logging(log_level or settings.log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e

    try:
        catalog = load_catalog(data_path or settings.data_path)
    except CatalogError as e:
        raise click.ClickException(str(e)) from e

    ctx.obj = EmojiConverter(catalog)


@cli.command()
@click.argument("value")
@format_option("emoji")
@click.pass_obj
def transform(converter: EmojiConverter, value: str, target_format: str):
    """Convert a single emoji given in any format."""
    try:
        click.echo(converter.transform(value, target_format))
    except NotFound as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("content", required=False)
@format_option("shortcode")
@click.pass_obj
def text(converter: EmojiConverter, content: str | None, target_format: str):
    """Convert every emoji in CONTENT, or in stdin when it is omitted."""
    if content is None:
        content = click.get_text_stream("stdin").read()
        click.echo(converter.transform_text(content, target_format), nl=False)
    else:
        click.echo(converter.transform_text(content, target_format))


@cli.command()
@click.argument("value")
@click.pass_obj
def info(converter: EmojiConverter, value: str):
    """Show every encoding of an emoji."""
    try:
        record = converter.get_info(value)
    except NotFound as e:
        raise click.ClickException(str(e)) from e

    for field, encoded in record.as_dict().items():
        click.echo(f"{field:9} {encoded}")


@cli.command(name="list")
@click.pass_obj
def list_(converter: EmojiConverter):
    """List the names of all supported emoji."""
    for name in sorted(converter.list_supported()):
        click.echo(name)


@cli.command()
@click.argument("value")
@click.pass_obj
def check(converter: EmojiConverter, value: str):
    """Exit with 0 if the emoji is supported, 1 otherwise."""
    if converter.is_supported(value):
        click.echo(f"{value}: supported")
    else:
        click.echo(f"{value}: not supported")
        sys.exit(1)


def main():
    cli(prog_name="emojiformat")
