from __future__ import annotations

from themesmith.categories import TokenCategory
from themesmith.lookup import (
    ReverseLookupIndex,
    category_for_highlight_token,
    category_for_scope,
    strip_token_suffix,
)


def test_scope_lookup_resolves_every_alias() -> None:
    assert category_for_scope("keyword") == "keyword"
    assert category_for_scope("keyword.control") == "keyword"
    assert category_for_scope("keyword.control.import") == "import"
    assert category_for_scope("entity.other.inherited-class") == "attribute"


def test_scope_lookup_is_exact() -> None:
    assert category_for_scope("keyword.control.flow") is None
    assert category_for_scope("Keyword") is None
    assert category_for_scope("") is None


def test_highlight_token_resolves_with_and_without_suffix() -> None:
    assert category_for_highlight_token("Keyword") == "keyword"
    assert category_for_highlight_token("KeywordTok") == "keyword"
    assert category_for_highlight_token("SpecialChar") == "string"
    assert category_for_highlight_token("SpecialCharTok") == "string"


def test_unmapped_highlight_tokens_resolve_to_none() -> None:
    assert category_for_highlight_token("RegionMarkerTok") is None
    assert category_for_highlight_token("Other") is None
    assert category_for_highlight_token("Tok") is None


def test_strip_token_suffix() -> None:
    assert strip_token_suffix("DecValTok") == "DecVal"
    assert strip_token_suffix("DecVal") == "DecVal"


def test_duplicate_identifiers_resolve_to_first_registered() -> None:
    index = ReverseLookupIndex(
        [
            TokenCategory("first", "First", ("shared",), ("Shared",)),
            TokenCategory("second", "Second", ("shared",), ("Shared",)),
        ]
    )

    assert index.category_for_scope("shared") == "first"
    assert index.category_for_highlight_token("SharedTok") == "first"
