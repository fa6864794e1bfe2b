"""Reverse lookup from format identifiers back to token categories."""

from __future__ import annotations

from typing import Final, Iterable, Optional

from .categories import TOKEN_CATEGORIES, TokenCategory

HIGHLIGHT_TOKEN_SUFFIX: Final[str] = "Tok"


class ReverseLookupIndex:
    """Map scope names and highlight tokens to their owning category.

    Both maps are built once from ``categories``. When an identifier is
    registered by more than one category the first one in registry order
    owns it.
    """

    def __init__(self, categories: Iterable[TokenCategory]) -> None:
        self._scopes: dict[str, str] = {}
        self._tokens: dict[str, str] = {}
        for category in categories:
            for scope in category.scopes:
                self._scopes.setdefault(scope, category.id)
            for token in category.highlight_tokens:
                self._tokens.setdefault(token, category.id)

    def category_for_scope(self, identifier: str) -> Optional[str]:
        """Return the category id owning the scope ``identifier``."""

        return self._scopes.get(identifier)

    def category_for_highlight_token(self, identifier: str) -> Optional[str]:
        """Return the category id owning a highlight token.

        ``identifier`` may be given with or without the ``Tok`` suffix that
        pandoc theme files append to token names.
        """

        return self._tokens.get(strip_token_suffix(identifier))


def strip_token_suffix(identifier: str) -> str:
    """Return ``identifier`` without a trailing ``Tok`` suffix."""

    if identifier.endswith(HIGHLIGHT_TOKEN_SUFFIX):
        return identifier[: -len(HIGHLIGHT_TOKEN_SUFFIX)]
    return identifier


DEFAULT_INDEX: Final[ReverseLookupIndex] = ReverseLookupIndex(
    TOKEN_CATEGORIES
)


def category_for_scope(identifier: str) -> Optional[str]:
    """Resolve a scope name through the registry's default index."""

    return DEFAULT_INDEX.category_for_scope(identifier)


def category_for_highlight_token(identifier: str) -> Optional[str]:
    """Resolve a highlight token through the registry's default index."""

    return DEFAULT_INDEX.category_for_highlight_token(identifier)
