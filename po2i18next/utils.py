# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Console and command line helpers."""

from typing import Callable, Optional

Echo = Optional[Callable[..., None]]


def _echo(message: str, echo: Echo, **kwargs) -> None:
    """Call the provided echo callback if it exists."""
    if echo:
        echo(message, **kwargs)


def convert_to_list(_, __, value):
    """Turn Click's multiple=True tuple into a plain list."""
    if value is None:
        return []
    return list(value)


def ensure_parent_directory(_, __, value):
    """Make sure the parent directory exists for a Click Path option."""
    if value:
        value.parent.mkdir(parents=True, exist_ok=True)
    return value
