from __future__ import annotations

from jobradar.frontmatter.scanner import (
    extract_balanced,
    find_structured_opener,
    locate_balanced,
)
from jobradar.frontmatter.types import Span


def test_escaped_quote_and_bracket_inside_string_do_not_end_array() -> None:
    text = 'chapters: [{"title": "A \\"quoted\\" ] part", "page": 1}]\nnext: x'
    literal = extract_balanced(text, "chapters")
    assert literal == '[{"title": "A \\"quoted\\" ] part", "page": 1}]'


def test_span_covers_opener_through_closer() -> None:
    text = "toc: [1, [2, 3]] rest"
    span = locate_balanced(text, "toc")
    assert span == Span(5, 16)
    assert text[span.start : span.end] == "[1, [2, 3]]"


def test_nested_object_with_inner_array() -> None:
    text = 'confidence: {"a": {"b": 1}, "c": [1, 2]} trailing'
    assert extract_balanced(text, "confidence") == '{"a": {"b": 1}, "c": [1, 2]}'


def test_square_bracket_never_closes_an_object() -> None:
    text = 'toc: {"items": ["a"]] }'
    assert extract_balanced(text, "toc") == '{"items": ["a"]] }'


def test_opposite_quote_inside_string_is_literal() -> None:
    text = "slides: [\"it's ]\", 1]"
    assert extract_balanced(text, "slides") == "[\"it's ]\", 1]"


def test_single_quoted_strings_are_tracked() -> None:
    text = "slides: ['a ] b', 'c']"
    assert extract_balanced(text, "slides") == "['a ] b', 'c']"


def test_whitespace_and_newlines_after_colon_are_skipped() -> None:
    text = "chapters:\n   [1, 2]"
    assert extract_balanced(text, "chapters") == "[1, 2]"


def test_missing_key_returns_none() -> None:
    assert locate_balanced("title: Koch", "chapters") is None


def test_scalar_value_returns_none() -> None:
    assert locate_balanced("confidence: high", "confidence") is None
    assert find_structured_opener("confidence: high", "confidence") is None


def test_key_at_end_of_text_returns_none() -> None:
    assert locate_balanced("chapters:", "chapters") is None
    assert locate_balanced("chapters:   ", "chapters") is None


def test_unterminated_literal_returns_none() -> None:
    text = "chapters: [1, [2, 3]"
    assert locate_balanced(text, "chapters") is None
    assert find_structured_opener(text, "chapters") == 10


def test_unterminated_string_returns_none() -> None:
    assert locate_balanced('toc: ["open]', "toc") is None


def test_only_first_occurrence_of_key_is_considered() -> None:
    text = "toc: none\ntoc: [1]"
    assert locate_balanced(text, "toc") is None


def test_key_match_is_case_sensitive() -> None:
    assert locate_balanced("Chapters: [1]", "chapters") is None
