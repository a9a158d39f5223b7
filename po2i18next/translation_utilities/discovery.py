# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Find PO files laid out by locale."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional


def _find_po_files_in_root(
    root: Path, po_file_paths: list[Path]
) -> Iterable[tuple[str, Path]]:
    """Find PO files in the locale directories of one root.

    :param root: Directory holding one sub directory per locale
    :param po_file_paths: Candidate paths relative to the locale directory,
        first match wins
    :return: Pairs of (locale, file_path)
    """
    for locale_dir in sorted(root.iterdir()):
        if not locale_dir.is_dir():
            continue
        for po_file_path in po_file_paths:
            po_path = locale_dir / po_file_path
            if po_path.is_file():
                yield locale_dir.name, po_path
                break


def find_po_files(
    source_dir: Path, filename: str, locales: Optional[list[str]] = None
) -> Iterable[tuple[str, Path]]:
    """Find translation files below a source directory.

    Both ``<source_dir>/<locale>/<filename>`` and
    ``<source_dir>/<locale>/LC_MESSAGES/<filename>`` are recognized.

    :param source_dir: Folder with one sub folder per locale
    :param filename: PO file name like 'translation.po'
    :param locales: Optional list of locales to filter. If None, all locales are included.
    :return: Pairs of (language, file_path) like ('de', '/path/to/de/translation.po')
    """
    if not source_dir.is_dir():
        return

    candidates = [Path(filename), Path("LC_MESSAGES") / filename]
    for locale, po_path in _find_po_files_in_root(source_dir, candidates):
        if locales is not None and locale not in locales:
            continue
        yield locale, po_path
