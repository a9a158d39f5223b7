# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Conversion of the translation model to i18next JSON."""

from __future__ import annotations

from typing import Any, Union

from ..utils import _echo
from .model import TranslationEntry, TranslationModel
from .options import ConversionOptions

JsonValue = Union[str, list, dict]

DEFAULT_CONTEXT = ""


def _key_path(
    entry: TranslationEntry, options: ConversionOptions, default_bucket: bool = False
) -> list[str]:
    """Path of object keys under which an entry is written.

    With ``default_bucket`` set, context-less entries of the ``nested`` style
    go in the ``""`` object instead of the top level.
    """
    if options.key_separator:
        path = entry.id.split(options.key_separator)
    else:
        path = [entry.id]

    if entry.context:
        if options.context_style == "suffix":
            path[-1] = f"{path[-1]}{options.context_separator}{entry.context}"
        else:
            path.insert(0, entry.context)
    elif default_bucket:
        path.insert(0, DEFAULT_CONTEXT)
    return path


def _needs_default_bucket(
    entries: list[TranslationEntry], options: ConversionOptions
) -> bool:
    """Whether a context name is also the top level key of a context-less id."""
    if options.context_style != "nested":
        return False

    contexts = {entry.context for entry in entries if entry.context}
    top_level = {
        _key_path(entry, options)[0] for entry in entries if not entry.context
    }
    return not contexts.isdisjoint(top_level)


def _assign(tree: dict[str, Any], path: list[str], value: JsonValue) -> bool:
    """Set a value in a nested dict, creating objects along the path.

    A value found where an object is needed, or at the target key, gets
    replaced.

    :return: True if an existing value was replaced
    """
    replaced = False
    node = tree
    for part in path[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            replaced = replaced or part in node
            child = node[part] = {}
        node = child

    replaced = replaced or path[-1] in node
    node[path[-1]] = value
    return replaced


def _entry_values(
    entry: TranslationEntry, path: list[str], options: ConversionOptions
) -> list[tuple[list[str], JsonValue]]:
    """Values for an entry as (path, value) pairs."""
    if not entry.is_plural:
        return [(path, entry.value)]

    if options.plural_style == "array":
        return [(path, list(entry.plurals))]

    parent, key = path[:-1], path[-1]
    if len(entry.plurals) == 2:
        singular, plural = entry.plurals
        return [(path, singular), (parent + [f"{key}_plural"], plural)]
    return [
        (parent + [f"{key}_{index}"], value)
        for index, value in enumerate(entry.plurals)
    ]


def model_to_i18next_json(
    model: TranslationModel, options: ConversionOptions
) -> dict[str, Any]:
    """Convert a translation model to i18next JSON.

    Messages without a context are top level keys; messages with a context
    sit in an object named after the context, or get the context appended to
    their key with the ``suffix`` style. When a context name equals the key of
    a message without context, all context-less messages move to the ``""``
    object so no message is lost. Keys keep the catalog order.

    Values that still end up at the same key (e.g. through ``key_separator``)
    are replaced by the later one and reported through ``options.echo``.

    :param model: Model to convert, usually after filtering
    :param options: Shaping options
    :return: Dictionary like {"bye": "Tschüss", "menu": {"Open": "Öffnen"}}
    """
    result: dict[str, Any] = {}
    echo = options.output

    entries = [
        entry
        for domain in model.domains.values()
        for entry in domain.entries.values()
        if entry.is_translated or not options.skip_untranslated
    ]
    default_bucket = _needs_default_bucket(entries, options)

    for entry in entries:
        path = _key_path(entry, options, default_bucket)
        for value_path, value in _entry_values(entry, path, options):
            if _assign(result, value_path, value):
                _echo(
                    f"  Key {'.'.join(value_path)!r} of {model.locale} was "
                    f"overwritten by msgid {entry.id!r}",
                    echo,
                    fg="yellow",
                )

    return result


def count_leaves(document: JsonValue) -> int:
    """Count translation values in a converted document.

    A plural array counts as one value.
    """
    if isinstance(document, dict):
        return sum(count_leaves(value) for value in document.values())
    return 1
