# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Pytest configuration."""

import json
from textwrap import dedent

import pytest

HEADER = r"""
msgid ""
msgstr ""
"Content-Type: text/plain; charset={charset}\n"
"Plural-Forms: {plural_forms}\n"
"""

GERMAN_PO = r"""
#. Greeting on the start page
#: /frontend/app.js:3
msgid "hello"
msgstr "Hallo"

# Shown on logout
#: /backend/session.py:40
msgid "bye"
msgstr "Tschüss"

msgctxt "menu"
msgid "Open"
msgstr "Öffnen"

msgid "apple"
msgid_plural "apples"
msgstr[0] "Apfel"
msgstr[1] "Äpfel"

#~ msgid "gone"
#~ msgstr "weg"
"""

RUSSIAN_PO = r"""
msgid "hello"
msgstr "Привет"

msgid "file"
msgid_plural "files"
msgstr[0] "файл"
msgstr[1] "файла"
msgstr[2] "файлов"
"""

LITHUANIAN_PO = r"""
msgid "thanks"
msgstr "Ačiū"

msgid "oak"
msgstr "Ąžuolas"
"""

UNFILTERED_PO = r"""
#: /frontend/app.js:12
msgid "col1"
msgstr "Column 1"

#: /frontend/table.js:8
#: /backend/export.py:90
msgid "col2"
msgstr "Column 2"

#: /backend/server.py:3
msgid "server_error"
msgstr "Server error"

#. Shown in the mail footer
#: /backend/mail.py:20
msgid "footer"
msgstr "Footer"
"""

NO_COMMENTS_PO = r"""
msgid "col1"
msgstr "Column 1"

msgid "server_error"
msgstr "Server error"
"""

NO_MATCH_PO = r"""
#: /backend/server.py:3
msgid "server_error"
msgstr "Server error"

#: /backend/mail.py:20
msgid "footer"
msgstr "Footer"
"""

BAD_FORMAT = """\
module.exports = {
    hello: 'Hello',
};
"""


def make_catalog(
    body, charset="UTF-8", plural_forms="nplurals=2; plural=(n != 1);"
):
    """Prefix a catalog body with a header."""
    header = HEADER.format(charset=charset, plural_forms=plural_forms)
    return dedent(header).lstrip() + dedent(body)


@pytest.fixture
def write_po(tmp_path):
    """Write catalog text to a file with the given encoding."""

    def _write_po(name, text, encoding="utf-8"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode(encoding))
        return path

    return _write_po


@pytest.fixture
def read_json():
    """Read a written JSON file."""

    def _read_json(path):
        with path.open("r", encoding="utf-8") as fp:
            return json.load(fp)

    return _read_json


@pytest.fixture
def german_po(write_po):
    """German catalog with comments, a context and a plural."""
    return write_po("de/translation.po", make_catalog(GERMAN_PO))


@pytest.fixture
def unfiltered_po(write_po):
    """Catalog with frontend and backend source references."""
    return write_po("en/translation.unfiltered.po", make_catalog(UNFILTERED_PO))
