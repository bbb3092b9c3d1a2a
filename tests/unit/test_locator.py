from __future__ import annotations

from jobradar.frontmatter import locate_frontmatter


def test_locates_block_at_document_start() -> None:
    document = "---\ntitle: Koch\ncompany: Hotel Post\n---\n# Body\n"
    assert locate_frontmatter(document) == "title: Koch\ncompany: Hotel Post\n"


def test_accepts_crlf_line_endings() -> None:
    document = "---\r\ntitle: Koch\r\n---\r\nBody"
    assert locate_frontmatter(document) == "title: Koch\r\n"


def test_skips_preamble_before_first_block() -> None:
    document = "Here is the extracted data:\n---\na: 1\n---\nbody\n---\nb: 2\n---\n"
    assert locate_frontmatter(document) == "a: 1\n"


def test_ignores_leading_bom_and_trailing_spaces_on_delimiters() -> None:
    document = "\ufeff---  \na: 1\n--- \nbody"
    assert locate_frontmatter(document) == "a: 1\n"


def test_empty_block_yields_empty_string() -> None:
    assert locate_frontmatter("---\n---\nbody") == ""


def test_missing_closing_delimiter() -> None:
    assert locate_frontmatter("---\ntitle: Koch\nno end") is None


def test_longer_dash_runs_are_not_delimiters() -> None:
    assert locate_frontmatter("----\na: 1\n----\n") is None


def test_empty_or_missing_document() -> None:
    assert locate_frontmatter("") is None
    assert locate_frontmatter(None) is None
