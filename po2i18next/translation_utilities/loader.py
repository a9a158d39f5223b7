# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Read PO files from disk with an explicit encoding."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Optional

from ..config import PO2I18NEXT_ENCODING_ALIASES


def resolve_encoding(name: str, aliases: Optional[dict[str, str]] = None) -> str:
    """Turn an encoding identifier into a Python codec name.

    :param name: Encoding like 'utf-8', 'latin13' or 'iso8859_13'
    :param aliases: Informal names to codec names, defaults to configuration
    :return: Canonical codec name like 'utf-8' or 'iso8859-13'
    :raises ValueError: If the encoding is unknown
    """
    if aliases is None:
        aliases = PO2I18NEXT_ENCODING_ALIASES

    codec_name = aliases.get(name.lower(), name)
    try:
        return codecs.lookup(codec_name).name
    except LookupError as error:
        raise ValueError(f"Unknown encoding: {name}") from error


def load_po_text(path: Path, encoding: str) -> Optional[str]:
    """Read a PO file and decode it.

    Bytes the encoding cannot map are replaced, not rejected; picking the
    right encoding is up to the caller.

    :param path: File to read
    :param encoding: Codec name, see :func:`resolve_encoding`
    :return: Decoded text, or None if the file is absent or unreadable
    """
    try:
        raw = Path(path).read_bytes()
    except (FileNotFoundError, IsADirectoryError, PermissionError, OSError):
        return None
    return raw.decode(encoding, errors="replace")
