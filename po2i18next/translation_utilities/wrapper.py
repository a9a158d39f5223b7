# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Convert one PO file to one i18next JSON file.

Missing, empty and broken input never raise: an empty JSON object is written
instead and the reason is reported in :attr:`ConversionResult.status`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..utils import _echo
from .convert import count_leaves, model_to_i18next_json
from .filters import apply_filter
from .io import write_json_file
from .loader import load_po_text
from .model import CatalogDecodeError, ConversionStatus, TranslationModel, build_model
from .options import ConversionOptions


@dataclass
class ConversionResult:
    """What a conversion wrote."""

    locale: str
    output_path: Path
    status: ConversionStatus
    entries: int = 0

    @property
    def is_empty(self) -> bool:
        """Whether ``{}`` was written."""
        return self.status is not ConversionStatus.CONVERTED


async def _load_model(
    locale: str, input_path: Path, options: ConversionOptions
) -> tuple[TranslationModel, ConversionStatus]:
    """Read and decode the input, applying the recovery policy."""
    echo = options.output

    text = await asyncio.to_thread(load_po_text, input_path, options.encoding)
    if text is None:
        _echo(f"  {input_path} not found, writing empty {locale}", echo, fg="yellow")
        return TranslationModel(locale=locale), ConversionStatus.MISSING

    try:
        model = await asyncio.to_thread(build_model, text, locale)
    except CatalogDecodeError as err:
        _echo(f"  {input_path} is not a PO file: {err}", echo, fg="yellow")
        return TranslationModel(locale=locale), ConversionStatus.MALFORMED

    if model.is_empty():
        _echo(f"  {input_path} has no translations", echo, fg="yellow")
        return model, ConversionStatus.EMPTY
    return model, ConversionStatus.CONVERTED


async def convert_gettext_to_i18next(
    locale: str,
    input_path: Path,
    output_path: Path,
    options: Optional[ConversionOptions] = None,
) -> ConversionResult:
    """Convert a PO file to i18next JSON and write it.

    :param locale: Locale like 'de', also used as the domain name
    :param input_path: PO file to read
    :param output_path: JSON file to create or overwrite
    :param options: Conversion options, defaults to ``ConversionOptions()``
    :return: ConversionResult describing the written file
    :raises Exception: Whatever the filter in ``options`` raises; the file is
        not written in that case
    :raises OSError: If the output file cannot be written
    """
    options = options or ConversionOptions()
    input_path, output_path = Path(input_path), Path(output_path)
    echo = options.output

    model, status = await _load_model(locale, input_path, options)

    if status is ConversionStatus.CONVERTED and options.filter is not None:
        await apply_filter(model, options.filter)

    document = model_to_i18next_json(model, options)
    if not document and status is ConversionStatus.CONVERTED:
        status = ConversionStatus.FILTERED_OUT
        _echo(f"  No translations left for {locale}", echo, fg="yellow")

    await asyncio.to_thread(write_json_file, output_path, document)
    entries = count_leaves(document)
    _echo(f"Wrote {output_path} ({entries} translation(s))", echo, fg="green")

    return ConversionResult(
        locale=locale, output_path=output_path, status=status, entries=entries
    )


def gettext_to_i18next(
    locale: str,
    input_path: Path,
    output_path: Path,
    options: Optional[ConversionOptions] = None,
) -> ConversionResult:
    """Run :func:`convert_gettext_to_i18next` to completion.

    Must not be called from a running event loop.
    """
    return asyncio.run(
        convert_gettext_to_i18next(locale, input_path, output_path, options)
    )


async def convert_many(
    jobs: Iterable[tuple[str, Path, Path]],
    options: Optional[ConversionOptions] = None,
) -> list[ConversionResult]:
    """Run several conversions concurrently.

    :param jobs: Tuples of (locale, input_path, output_path)
    :param options: Options shared by all conversions
    :return: Results in the order of ``jobs``
    """
    return await asyncio.gather(
        *(
            convert_gettext_to_i18next(locale, input_path, output_path, options)
            for locale, input_path, output_path in jobs
        )
    )
