# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Convert gettext PO catalogs to i18next JSON resources."""

from .translation_utilities import (
    ConversionOptions,
    ConversionResult,
    ConversionStatus,
    convert_gettext_to_i18next,
    gettext_to_i18next,
)

__version__ = "1.0.0"

__all__ = (
    "__version__",
    "ConversionOptions",
    "ConversionResult",
    "ConversionStatus",
    "convert_gettext_to_i18next",
    "gettext_to_i18next",
)
