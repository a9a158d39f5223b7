# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Filter stage between decoding and serialization.

A filter is any callable taking the :class:`~.model.TranslationModel` and a
domain name. It removes entries through
:meth:`~.model.TranslationModel.delete_translation`. Coroutine functions are
supported; the conversion waits until the returned awaitable is done.

.. code-block:: python

    def frontend_only(model, domain):
        for key in model.list_keys(domain):
            comment = model.get_comment(domain, "", key)
            if comment and "/frontend/" not in comment.get("code", "/frontend/"):
                model.delete_translation(domain, "", key)
"""

from __future__ import annotations

import inspect
from importlib import import_module

from .model import TranslationModel
from .options import Filter


async def apply_filter(model: TranslationModel, filter_fn: Filter) -> None:
    """Run a filter over every domain of a model, one domain at a time.

    :param model: Model to filter in place
    :param filter_fn: Filter callable, sync or async
    """
    for domain in model.list_domains():
        result = filter_fn(model, domain)
        if inspect.isawaitable(result):
            await result


def code_comment_filter(*needles: str) -> Filter:
    """Keep entries referenced from source paths containing any needle.

    Entries without a ``code`` comment are kept.

    :param needles: Substrings like '/frontend/'
    :return: Filter callable
    """

    def _filter(model: TranslationModel, domain: str) -> None:
        for context in model.list_contexts(domain):
            for key in model.list_keys(domain, context):
                comment = model.get_comment(domain, context, key)
                if not comment or "code" not in comment:
                    continue
                if not any(needle in comment["code"] for needle in needles):
                    model.delete_translation(domain, context, key)

    return _filter


def load_filter(import_path: str) -> Filter:
    """Import a filter from a 'package.module:attribute' path.

    :raises ValueError: If the path is malformed or does not name a callable
    """
    module_name, _, attribute = import_path.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{import_path}'")

    try:
        filter_fn = getattr(import_module(module_name), attribute)
    except (ImportError, AttributeError) as error:
        raise ValueError(f"Cannot load filter '{import_path}': {error}") from error

    if not callable(filter_fn):
        raise ValueError(f"Filter '{import_path}' is not callable")
    return filter_fn
