# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""JSON output helpers."""

from __future__ import annotations

from json import dump
from pathlib import Path
from typing import Any


def write_json_file(path: Path, data: Any) -> None:
    """Write data as UTF-8 JSON, replacing any existing file.

    :param path: Target file, parent directories are created
    :param data: JSON serializable data
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as fp:
        dump(data, fp, indent=2, ensure_ascii=False)
        fp.write("\n")
