# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""In-memory translation model built from a decoded PO catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import polib
from polib import POEntry

EntryKey = tuple[str, str]  # (context, id)


class CatalogDecodeError(ValueError):
    """Raised when text cannot be decoded as a PO catalog."""


class ConversionStatus(Enum):
    """Outcome of one conversion.

    Anything other than ``CONVERTED`` means ``{}`` was written.
    """

    CONVERTED = "converted"
    MISSING = "missing"
    EMPTY = "empty"
    MALFORMED = "malformed"
    FILTERED_OUT = "filtered_out"


@dataclass
class TranslationEntry:
    """A single translatable message."""

    id: str
    context: str = ""
    value: str = ""
    plural_id: Optional[str] = None
    plurals: list[str] = field(default_factory=list)
    comments: dict[str, str] = field(default_factory=dict)
    flags: list[str] = field(default_factory=list)

    @property
    def key(self) -> EntryKey:
        """Key of the entry inside its domain."""
        return self.context, self.id

    @property
    def is_plural(self) -> bool:
        """Whether the entry carries plural forms."""
        return bool(self.plurals)

    @property
    def is_translated(self) -> bool:
        """Whether any translation text is present."""
        if self.plurals:
            return any(self.plurals)
        return bool(self.value)


@dataclass
class TranslationDomain:
    """Translations of one namespace, keyed by (context, id)."""

    name: str
    entries: dict[EntryKey, TranslationEntry] = field(default_factory=dict)

    def add(self, entry: TranslationEntry) -> None:
        """Add an entry, replacing one with the same key."""
        self.entries[entry.key] = entry

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class TranslationModel:
    """Translations of one locale, grouped by domain.

    This is also the handle passed to conversion filters. Filters may read
    anything and remove entries with :meth:`delete_translation`. Adding
    domains or entries from a filter is not supported and its outcome is
    undefined.
    """

    locale: str
    domains: dict[str, TranslationDomain] = field(default_factory=dict)

    def list_domains(self) -> list[str]:
        return list(self.domains)

    def list_contexts(self, domain: str) -> list[str]:
        """Distinct contexts used in a domain, in catalog order."""
        contexts: dict[str, None] = {}
        for context, _ in self._entries(domain):
            contexts.setdefault(context, None)
        return list(contexts)

    def list_keys(self, domain: str, context: str = "") -> list[str]:
        """Message ids of a domain within one context."""
        return [
            msgid
            for entry_context, msgid in self._entries(domain)
            if entry_context == context
        ]

    def get_translation(
        self, domain: str, context: str, key: str
    ) -> Optional[TranslationEntry]:
        return self._entries(domain).get((context, key))

    def get_comment(
        self, domain: str, context: str, key: str
    ) -> Optional[dict[str, str]]:
        """Comments of an entry by kind, or None if it has none."""
        entry = self.get_translation(domain, context, key)
        if entry is None or not entry.comments:
            return None
        return entry.comments

    def delete_translation(self, domain: str, context: str, key: str) -> None:
        """Remove an entry. Unknown keys are ignored."""
        self._entries(domain).pop((context, key), None)

    def count(self) -> int:
        """Number of entries across all domains."""
        return sum(len(domain) for domain in self.domains.values())

    def is_empty(self) -> bool:
        return self.count() == 0

    def _entries(self, domain: str) -> dict[EntryKey, TranslationEntry]:
        if domain not in self.domains:
            return {}
        return self.domains[domain].entries


def _entry_comments(po_entry: POEntry) -> dict[str, str]:
    """Collect the comments of a PO entry by kind, skipping absent ones."""
    comments: dict[str, str] = {}

    if po_entry.occurrences:
        comments["code"] = "\n".join(
            f"{path}:{line}" if line else path for path, line in po_entry.occurrences
        )
    if po_entry.tcomment:
        comments["translator"] = po_entry.tcomment
    if po_entry.comment:
        comments["extracted"] = po_entry.comment
    if po_entry.flags:
        comments["flag"] = ", ".join(po_entry.flags)
    if po_entry.previous_msgid:
        comments["previous"] = po_entry.previous_msgid

    return comments


def _entry_from_po(po_entry: POEntry) -> TranslationEntry:
    """Copy a polib entry into a :class:`TranslationEntry`."""
    plurals: list[str] = []
    if po_entry.msgstr_plural:
        # missing msgstr[N] stay at their index as empty strings
        forms = {int(index): text for index, text in po_entry.msgstr_plural.items()}
        plurals = [forms.get(index, "") for index in range(max(forms) + 1)]

    return TranslationEntry(
        id=po_entry.msgid,
        context=po_entry.msgctxt or "",
        value=po_entry.msgstr or (plurals[0] if plurals else ""),
        plural_id=po_entry.msgid_plural or None,
        plurals=plurals,
        comments=_entry_comments(po_entry),
        flags=list(po_entry.flags),
    )


def build_model(text: str, domain: str) -> TranslationModel:
    """Build a translation model from PO catalog text.

    The catalog header and obsolete entries are left out.

    :param text: Decoded PO file contents
    :param domain: Domain name for the catalog, usually the locale
    :return: Model holding one domain
    :raises CatalogDecodeError: If the text is not a PO catalog
    """
    model = TranslationModel(locale=domain)
    if not text.strip():
        return model

    # polib reads a file instead when the text is an existing path
    if not text.endswith("\n"):
        text += "\n"

    try:
        po_file = polib.pofile(text)
    except (OSError, ValueError, UnicodeError) as error:
        raise CatalogDecodeError(str(error)) from error

    translation_domain = TranslationDomain(name=domain)
    for po_entry in po_file:
        if po_entry.obsolete or not po_entry.msgid:
            continue
        translation_domain.add(_entry_from_po(po_entry))

    if translation_domain.entries:
        model.domains[domain] = translation_domain
    return model
