# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""PO to i18next conversion utilities.

Turns gettext translation catalogs (.po files) into the JSON resources read
by i18next. Missing, empty or broken catalogs produce ``{}`` rather than an
error.

CONVERSION  ------
Convert one PO file and write the JSON file:

.. code-block:: python

    from pathlib import Path
    from po2i18next.translation_utilities import (
        ConversionOptions,
        gettext_to_i18next,
    )

    result = gettext_to_i18next(
        "de",
        Path("locales/de/translation.po"),
        Path("public/locales/de.json"),
        ConversionOptions(encoding="utf-8", quiet=True),
    )
    # result.status tells CONVERTED from MISSING, EMPTY, MALFORMED, FILTERED_OUT

Inside an event loop, await :func:`convert_gettext_to_i18next` instead, or
:func:`convert_many` to convert several locales at once.

FILTERING  ------
Drop entries before they are written:

.. code-block:: python

    from po2i18next.translation_utilities import code_comment_filter

    options = ConversionOptions(filter=code_comment_filter("/frontend/"))

Custom filters receive the :class:`TranslationModel` and a domain name and
remove entries with ``model.delete_translation(domain, context, key)``.

OUTPUT SHAPE  ------
Messages without a context are top level keys, messages with a context are
grouped in an object named after the context. Plural forms are written as a
list, or as i18next suffixed keys with ``plural_style="suffix"``.

.. code-block:: json

    {"bye": "Tschüss", "apple": ["Apfel", "Äpfel"], "menu": {"Open": "Öffnen"}}

CLI COMMANDS  ------

    - ``po2i18next convert``: convert one PO file
    - ``po2i18next convert-dir``: convert every locale found in a directory

"""

from __future__ import annotations

from .convert import count_leaves, model_to_i18next_json
from .discovery import find_po_files
from .filters import apply_filter, code_comment_filter, load_filter
from .io import write_json_file
from .loader import load_po_text, resolve_encoding
from .model import (
    CatalogDecodeError,
    ConversionStatus,
    TranslationDomain,
    TranslationEntry,
    TranslationModel,
    build_model,
)
from .options import ConversionOptions
from .wrapper import (
    ConversionResult,
    convert_gettext_to_i18next,
    convert_many,
    gettext_to_i18next,
)

__all__ = [
    "CatalogDecodeError",
    "ConversionOptions",
    "ConversionResult",
    "ConversionStatus",
    "TranslationDomain",
    "TranslationEntry",
    "TranslationModel",
    "apply_filter",
    "build_model",
    "code_comment_filter",
    "convert_gettext_to_i18next",
    "convert_many",
    "count_leaves",
    "find_po_files",
    "gettext_to_i18next",
    "load_filter",
    "load_po_text",
    "model_to_i18next_json",
    "resolve_encoding",
    "write_json_file",
]
