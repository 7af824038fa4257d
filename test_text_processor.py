#!/usr/bin/env python3
"""
Tests for text normalization, similarity and numeral parsing
"""

import pytest

from chapter_locator.utils import TextProcessor


def test_clean_collapses_whitespace():
    assert TextProcessor.clean("  Chapter \t 3\n Title  ") == "Chapter 3 Title"
    assert TextProcessor.clean(None) == ""


def test_tokenize_drops_stop_words_and_punctuation():
    tokens = TextProcessor.tokenize("The Direct Instruction Lesson")
    assert tokens == ["direct", "instruction", "lesson"]
    assert TextProcessor.tokenize("Social, Moral, and Emotional Development") == [
        "social", "moral", "emotional", "development"
    ]


@pytest.mark.parametrize("a,b", [
    (["direct", "instruction", "lesson"], ["effective", "lesson"]),
    (["a"], ["b", "c"]),
    ([], ["x"]),
    (["x", "y"], ["y", "x", "z"]),
])
def test_jaccard_is_symmetric_and_bounded(a, b):
    forward = TextProcessor.jaccard(a, b)
    assert forward == TextProcessor.jaccard(b, a)
    assert 0.0 <= forward <= 1.0


def test_jaccard_identity_disjoint_and_empty():
    assert TextProcessor.jaccard(["cognitive", "development"], ["development", "cognitive"]) == 1.0
    assert TextProcessor.jaccard(["student"], ["motivation"]) == 0.0
    assert TextProcessor.jaccard([], []) == 0.0


def test_reworded_titles_partially_match():
    found = TextProcessor.tokenize("The Effective Lesson")
    expected = TextProcessor.tokenize("The Direct Instruction Lesson")
    assert TextProcessor.jaccard(found, expected) == pytest.approx(1 / 4)


@pytest.mark.parametrize("text,value", [
    ("I", 1), ("IV", 4), ("IX", 9), ("XII", 12), ("xl", 40), ("MCMXCIV", 1994), ("MMM", 3000),
])
def test_roman_numerals(text, value):
    assert TextProcessor.roman_to_number(text) == value


@pytest.mark.parametrize("text", ["", "   ", "ABC", "twelve", "12"])
def test_invalid_roman_numerals(text):
    assert TextProcessor.roman_to_number(text) is None


@pytest.mark.parametrize("token", ["7", "seven", "SEVEN", "VII", "vii", "07"])
def test_numeral_tokens_parse_uniformly(token):
    assert TextProcessor.parse_numeral(token) == 7


@pytest.mark.parametrize("token", ["", "review", "thirteen", None])
def test_unrecognized_numerals(token):
    assert TextProcessor.parse_numeral(token) is None


def test_is_numeral_token():
    assert TextProcessor.is_numeral_token("TWO")
    assert TextProcessor.is_numeral_token(" 12 ")
    assert TextProcessor.is_numeral_token("IV.")
    assert not TextProcessor.is_numeral_token("Chapter 2")
    assert not TextProcessor.is_numeral_token("Review")


@pytest.mark.parametrize("word", ["Civil", "Vivid", "Did", "Lid", "IIII", "VX"])
def test_roman_letter_words_are_not_numerals(word):
    assert not TextProcessor.is_numeral_token(word)


@pytest.mark.parametrize("token", ["XIV", "mcmxciv", "XL", "iii"])
def test_well_formed_roman_tokens(token):
    assert TextProcessor.is_numeral_token(token)
