# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""CLI for PO to i18next conversion."""

import asyncio
from pathlib import Path
from typing import Optional

import rich_click as click
from rich_click import STRING, Choice
from rich_click import Path as ClickPath
from rich_click import group, option, secho

from .config import (
    PO2I18NEXT_CONTEXT_SEPARATOR,
    PO2I18NEXT_CONTEXT_STYLE,
    PO2I18NEXT_DEFAULT_ENCODING,
    PO2I18NEXT_PLURAL_STYLE,
    PO2I18NEXT_PO_FILENAME,
)
from .translation_utilities.discovery import find_po_files
from .translation_utilities.filters import load_filter
from .translation_utilities.model import ConversionStatus
from .translation_utilities.options import (
    CONTEXT_STYLES,
    PLURAL_STYLES,
    ConversionOptions,
)
from .translation_utilities.wrapper import convert_many, gettext_to_i18next
from .utils import convert_to_list, ensure_parent_directory

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.USE_MARKDOWN = False

STATUS_COLORS = {
    ConversionStatus.CONVERTED: "green",
    ConversionStatus.FILTERED_OUT: "yellow",
    ConversionStatus.EMPTY: "yellow",
    ConversionStatus.MISSING: "yellow",
    ConversionStatus.MALFORMED: "red",
}


def conversion_options(func):
    """Attach the options shared by all conversion commands."""
    decorators = [
        option(
            "--encoding",
            "-e",
            type=STRING,
            default=PO2I18NEXT_DEFAULT_ENCODING,
            show_default=True,
            help="Encoding of the PO files, e.g. 'utf-8' or 'latin13'.",
        ),
        option(
            "--filter",
            "filter_path",
            type=STRING,
            default=None,
            help="Filter callable as 'package.module:function'.",
        ),
        option(
            "--plural-style",
            type=Choice(PLURAL_STYLES),
            default=PO2I18NEXT_PLURAL_STYLE,
            show_default=True,
            help="Write plurals as a list or as i18next suffixed keys.",
        ),
        option(
            "--context-style",
            type=Choice(CONTEXT_STYLES),
            default=PO2I18NEXT_CONTEXT_STYLE,
            show_default=True,
            help="Group contexts in objects or append them to keys.",
        ),
        option(
            "--context-separator",
            type=STRING,
            default=PO2I18NEXT_CONTEXT_SEPARATOR,
            show_default=True,
            help="Separator for the suffix context style.",
        ),
        option(
            "--key-separator",
            "-k",
            type=STRING,
            default=None,
            help="Split message ids into nested objects, e.g. '##'.",
        ),
        option(
            "--skip-untranslated",
            is_flag=True,
            default=False,
            help="Leave out messages without a translation.",
        ),
        option("--quiet", "-q", is_flag=True, default=False, help="No output."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_options(
    encoding: str,
    filter_path: Optional[str],
    plural_style: str,
    context_style: str,
    context_separator: str,
    key_separator: Optional[str],
    skip_untranslated: bool,
    quiet: bool,
) -> Optional[ConversionOptions]:
    """Create conversion options from CLI values, or None after an error."""
    try:
        filter_fn = load_filter(filter_path) if filter_path else None
        return ConversionOptions(
            quiet=quiet,
            filter=filter_fn,
            encoding=encoding,
            plural_style=plural_style,
            context_style=context_style,
            context_separator=context_separator,
            key_separator=key_separator,
            skip_untranslated=skip_untranslated,
            echo=secho,
        )
    except ValueError as error:
        secho(f"Error: {error}", fg="red")
        return None


@group()
def po2i18next():
    """PO to i18next conversion commands."""


@po2i18next.command("convert")
@option("--locale", "-l", required=True, help="Language code like 'de' or 'fr'")
@option(
    "--source",
    "-s",
    required=True,
    type=ClickPath(dir_okay=False, file_okay=True, path_type=Path),
    help="PO file to convert. A missing file produces an empty JSON file.",
)
@option(
    "--target",
    "-t",
    required=True,
    type=ClickPath(dir_okay=False, file_okay=True, writable=True, path_type=Path),
    callback=ensure_parent_directory,
    help="JSON file to write.",
)
@conversion_options
def convert(locale: str, source: Path, target: Path, **kwargs):
    """Convert one PO file to an i18next JSON file.

    Examples:
        po2i18next convert -l de -s locales/de/translation.po -t public/de.json
        po2i18next convert -l lt -s lt.po -t lt.json -e latin13 --filter app.i18n:frontend_only
    """
    options = build_options(**kwargs)
    if options is None:
        return

    result = gettext_to_i18next(locale, source, target, options)
    if not options.quiet and result.is_empty:
        secho(
            f"{locale}: {result.status.value}, wrote empty {result.output_path}",
            fg=STATUS_COLORS[result.status],
        )


@po2i18next.command("convert-dir")
@option(
    "--source",
    "-s",
    "source_dir",
    required=True,
    type=ClickPath(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Directory with one sub directory per locale.",
)
@option(
    "--target",
    "-t",
    "target_dir",
    required=True,
    type=ClickPath(file_okay=False, dir_okay=True, writable=True, path_type=Path),
    help="Directory for the <locale>.json files.",
)
@option(
    "--locale",
    "-l",
    "locales",
    multiple=True,
    callback=convert_to_list,
    help="Languages to convert. If not provided, converts all languages found.",
)
@option(
    "--filename",
    type=STRING,
    default=PO2I18NEXT_PO_FILENAME,
    show_default=True,
    help="PO file name inside each locale directory.",
)
@conversion_options
def convert_dir(
    source_dir: Path,
    target_dir: Path,
    locales: list[str],
    filename: str,
    **kwargs,
):
    """Convert the PO files of every locale in a directory.

    Looks for <source>/<locale>/<filename> and
    <source>/<locale>/LC_MESSAGES/<filename>.

    Examples:
        po2i18next convert-dir -s locales -t public/locales
        po2i18next convert-dir -s locales -t public/locales -l de -l sv
    """
    options = build_options(**kwargs)
    if options is None:
        return

    jobs = [
        (locale, po_path, target_dir / f"{locale}.json")
        for locale, po_path in find_po_files(source_dir, filename, locales or None)
    ]
    if not jobs:
        if not options.quiet:
            secho(f"No {filename} files found in {source_dir}", fg="yellow")
        return

    results = asyncio.run(convert_many(jobs, options))

    if not options.quiet:
        converted = sum(
            1 for result in results if result.status is ConversionStatus.CONVERTED
        )
        secho(
            f"Summary: locales={len(results)}, converted={converted}, "
            f"empty={len(results) - converted}",
        )
        for result in results:
            if result.is_empty:
                secho(
                    f"  {result.locale}: {result.status.value}",
                    fg=STATUS_COLORS[result.status],
                )
