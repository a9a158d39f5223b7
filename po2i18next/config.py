# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Default configuration for PO to i18next conversion.

Every option can be overridden per call through
:class:`po2i18next.translation_utilities.options.ConversionOptions`, or in
bulk by passing a mapping of these keys to
:meth:`~po2i18next.translation_utilities.options.ConversionOptions.from_config`.
"""

PO2I18NEXT_DEFAULT_ENCODING = "utf-8"
"""Encoding used to decode PO files when none is given."""

PO2I18NEXT_ENCODING_ALIASES = {
    "utf8": "utf-8",
    "latin13": "iso8859_13",
    "latin-13": "iso8859_13",
}
"""Informal encoding names mapped to Python codec names."""

PO2I18NEXT_PLURAL_STYLE = "array"
"""How plural forms are written.

- ``array``: ``{"apple": ["apple", "apples"]}``
- ``suffix``: ``{"apple": "apple", "apple_plural": "apples"}``
"""

PO2I18NEXT_CONTEXT_STYLE = "nested"
"""How message contexts are written.

- ``nested``: ``{"menu": {"Open": "Öffnen"}}``
- ``suffix``: ``{"Open_menu": "Öffnen"}``

Messages without a context are always written at the top level.
"""

PO2I18NEXT_CONTEXT_SEPARATOR = "_"
"""Separator between message id and context for the ``suffix`` style."""

PO2I18NEXT_KEY_SEPARATOR = None
"""Split message ids on this string into nested objects (e.g. ``"##"``)."""

PO2I18NEXT_SKIP_UNTRANSLATED = False
"""Drop messages whose translation is empty."""

PO2I18NEXT_PO_FILENAME = "translation.po"
"""File name looked up per locale directory by ``convert-dir``."""
