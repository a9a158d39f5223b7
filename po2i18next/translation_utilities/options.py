# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Options for a single PO to i18next conversion."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from .. import config
from ..utils import Echo
from .loader import resolve_encoding
from .model import TranslationModel

Filter = Callable[[TranslationModel, str], Union[None, Awaitable[None]]]

PLURAL_STYLES = ("array", "suffix")
CONTEXT_STYLES = ("nested", "suffix")


@dataclass
class ConversionOptions:
    """Conversion settings.

    :param quiet: Suppress all messages, even if ``echo`` is set
    :param filter: Called once per domain with the model and the domain name
        before serialization, see :mod:`.filters`
    :param encoding: Encoding of the PO file
    :param plural_style: ``array`` or ``suffix``
    :param context_style: ``nested`` or ``suffix``
    :param context_separator: Joins id and context for the ``suffix`` style
    :param key_separator: Split ids into nested objects on this string
    :param skip_untranslated: Leave out messages with an empty translation
    :param echo: Callback for progress messages, e.g. ``click.secho``
    """

    quiet: bool = False
    filter: Optional[Filter] = None
    encoding: str = config.PO2I18NEXT_DEFAULT_ENCODING
    plural_style: str = config.PO2I18NEXT_PLURAL_STYLE
    context_style: str = config.PO2I18NEXT_CONTEXT_STYLE
    context_separator: str = config.PO2I18NEXT_CONTEXT_SEPARATOR
    key_separator: Optional[str] = config.PO2I18NEXT_KEY_SEPARATOR
    skip_untranslated: bool = config.PO2I18NEXT_SKIP_UNTRANSLATED
    echo: Echo = None

    def __post_init__(self):
        """Validate styles and normalize the encoding."""
        if self.plural_style not in PLURAL_STYLES:
            raise ValueError(f"Unknown plural style: {self.plural_style}")
        if self.context_style not in CONTEXT_STYLES:
            raise ValueError(f"Unknown context style: {self.context_style}")
        if self.key_separator == "":
            self.key_separator = None
        self.encoding = resolve_encoding(self.encoding)

    @property
    def output(self) -> Echo:
        """Echo callback to use, None when quiet."""
        return None if self.quiet else self.echo

    @classmethod
    def from_config(
        cls, app_config: Mapping[str, Any], **overrides
    ) -> ConversionOptions:
        """Create options from a mapping of ``PO2I18NEXT_*`` keys.

        Missing keys fall back to :mod:`po2i18next.config`, keyword arguments
        win over both.
        """

        def get(key):
            return app_config.get(key, getattr(config, key))

        values = {
            "encoding": get("PO2I18NEXT_DEFAULT_ENCODING"),
            "plural_style": get("PO2I18NEXT_PLURAL_STYLE"),
            "context_style": get("PO2I18NEXT_CONTEXT_STYLE"),
            "context_separator": get("PO2I18NEXT_CONTEXT_SEPARATOR"),
            "key_separator": get("PO2I18NEXT_KEY_SEPARATOR"),
            "skip_untranslated": get("PO2I18NEXT_SKIP_UNTRANSLATED"),
        }
        values.update(overrides)
        return cls(**values)
