# -*- coding: utf-8 -*-
#
# This file is part of po2i18next.
# Copyright (C) 2026 po2i18next contributors.
#
# po2i18next is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Tests for the i18next JSON shape."""

from po2i18next.translation_utilities import (
    ConversionOptions,
    TranslationDomain,
    TranslationEntry,
    TranslationModel,
    count_leaves,
    model_to_i18next_json,
)


def make_model(*entries):
    """Model with one 'en' domain holding the given entries."""
    domain = TranslationDomain(name="en")
    for entry in entries:
        domain.add(entry)
    return TranslationModel(locale="en", domains={"en": domain})


def test_plain_and_context_entries():
    """Test that context-less entries are top level and contexts are nested."""
    model = make_model(
        TranslationEntry(id="hello", value="Hello"),
        TranslationEntry(id="Open", context="menu", value="Open menu"),
        TranslationEntry(id="Open", context="file", value="Open file"),
    )

    assert model_to_i18next_json(model, ConversionOptions()) == {
        "hello": "Hello",
        "menu": {"Open": "Open menu"},
        "file": {"Open": "Open file"},
    }


def test_context_suffix_style():
    """Test i18next style context suffixes."""
    model = make_model(
        TranslationEntry(id="friend", value="Friend"),
        TranslationEntry(id="friend", context="male", value="Boyfriend"),
    )
    options = ConversionOptions(context_style="suffix")

    assert model_to_i18next_json(model, options) == {
        "friend": "Friend",
        "friend_male": "Boyfriend",
    }


def test_plural_array_style():
    """Test that plurals are written as ordered lists."""
    model = make_model(
        TranslationEntry(id="apple", plural_id="apples", plurals=["Apple", "Apples"])
    )

    assert model_to_i18next_json(model, ConversionOptions()) == {
        "apple": ["Apple", "Apples"]
    }


def test_plural_suffix_style_two_forms():
    """Test _plural suffix for languages with two forms."""
    model = make_model(
        TranslationEntry(id="apple", plural_id="apples", plurals=["Apple", "Apples"])
    )
    options = ConversionOptions(plural_style="suffix")

    assert model_to_i18next_json(model, options) == {
        "apple": "Apple",
        "apple_plural": "Apples",
    }


def test_plural_suffix_style_many_forms():
    """Test numbered suffixes for languages with more than two forms."""
    model = make_model(
        TranslationEntry(
            id="file",
            context="upload",
            plural_id="files",
            plurals=["файл", "файла", "файлов"],
        )
    )
    options = ConversionOptions(plural_style="suffix")

    assert model_to_i18next_json(model, options) == {
        "upload": {"file_0": "файл", "file_1": "файла", "file_2": "файлов"}
    }


def test_key_separator_nests_ids():
    """Test splitting ids into nested objects."""
    model = make_model(
        TranslationEntry(id="nav##home", value="Home"),
        TranslationEntry(id="nav##about", value="About"),
        TranslationEntry(id="title", value="Title"),
    )
    options = ConversionOptions(key_separator="##")

    assert model_to_i18next_json(model, options) == {
        "nav": {"home": "Home", "about": "About"},
        "title": "Title",
    }


def test_context_clashing_with_id_uses_default_bucket():
    """Test that a context named like a message id keeps both messages."""
    model = make_model(
        TranslationEntry(id="menu", value="Menu"),
        TranslationEntry(id="hello", value="Hello"),
        TranslationEntry(id="Open", context="menu", value="Open it"),
    )

    document = model_to_i18next_json(model, ConversionOptions())

    assert document == {
        "": {"menu": "Menu", "hello": "Hello"},
        "menu": {"Open": "Open it"},
    }
    assert count_leaves(document) == model.count()


def test_context_clash_ignored_for_suffix_style():
    """Test that the suffix context style keeps context-less ids top level."""
    model = make_model(
        TranslationEntry(id="menu", value="Menu"),
        TranslationEntry(id="Open", context="menu", value="Open it"),
    )
    options = ConversionOptions(context_style="suffix")

    assert model_to_i18next_json(model, options) == {
        "menu": "Menu",
        "Open_menu": "Open it",
    }


def test_overwritten_key_is_reported():
    """Test that values replaced through key_separator are echoed."""
    messages = []

    def echo(message, **kwargs):
        messages.append(message)

    model = make_model(
        TranslationEntry(id="nav", value="Navigation"),
        TranslationEntry(id="nav##home", value="Home"),
    )
    options = ConversionOptions(key_separator="##", echo=echo)

    assert model_to_i18next_json(model, options) == {"nav": {"home": "Home"}}
    assert len(messages) == 1
    assert "'nav.home'" in messages[0]
    assert "'nav##home'" in messages[0]


def test_skip_untranslated():
    """Test that empty translations are dropped only when asked to."""
    model = make_model(
        TranslationEntry(id="hello", value="Hallo"),
        TranslationEntry(id="bye", value=""),
    )

    assert model_to_i18next_json(model, ConversionOptions()) == {
        "hello": "Hallo",
        "bye": "",
    }
    assert model_to_i18next_json(model, ConversionOptions(skip_untranslated=True)) == {
        "hello": "Hallo"
    }


def test_emptied_domain_contributes_nothing():
    """Test that a domain without entries leaves no trace."""
    model = make_model(TranslationEntry(id="hello", value="Hello"))
    model.delete_translation("en", "", "hello")

    assert model_to_i18next_json(model, ConversionOptions()) == {}


def test_count_leaves():
    """Test counting translation values."""
    assert count_leaves({}) == 0
    assert count_leaves({"a": "A", "b": ["B", "Bs"], "ctx": {"c": "C"}}) == 3
