"""Token categories and their identifiers in each external format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

CATEGORY_KEYWORD: Final[str] = "keyword"
CATEGORY_ERROR: Final[str] = "error"
CATEGORY_STRING: Final[str] = "string"
CATEGORY_FUNCTION: Final[str] = "function"
CATEGORY_COMMENT: Final[str] = "comment"
CATEGORY_TYPE: Final[str] = "type"
CATEGORY_VARIABLE: Final[str] = "variable"
CATEGORY_NUMBER: Final[str] = "number"
CATEGORY_CONSTANT: Final[str] = "constant"
CATEGORY_OPERATOR: Final[str] = "operator"
CATEGORY_IMPORT: Final[str] = "import"
CATEGORY_ATTRIBUTE: Final[str] = "attribute"

GLOBAL_BACKGROUND: Final[str] = "background"
GLOBAL_FOREGROUND: Final[str] = "foreground"


@dataclass(frozen=True)
class TokenCategory:
    """A class of lexical element that a theme assigns one style to.

    ``scopes`` are TextMate scope names, shared by the VS Code and tmTheme
    formats. ``highlight_tokens`` are skylighting token names as used by
    pandoc themes, without the ``Tok`` suffix.
    """

    id: str
    label: str
    scopes: tuple[str, ...]
    highlight_tokens: tuple[str, ...]


@dataclass(frozen=True)
class GlobalSetting:
    """A theme-wide color that every format expresses directly."""

    id: str
    label: str


TOKEN_CATEGORIES: Final[tuple[TokenCategory, ...]] = (
    TokenCategory(
        id=CATEGORY_KEYWORD,
        label="Keyword",
        scopes=("keyword", "keyword.control"),
        highlight_tokens=("Keyword", "ControlFlow"),
    ),
    TokenCategory(
        id=CATEGORY_ERROR,
        label="Error",
        scopes=("invalid",),
        highlight_tokens=("Error", "Alert", "Warning"),
    ),
    TokenCategory(
        id=CATEGORY_STRING,
        label="String",
        scopes=("string",),
        highlight_tokens=(
            "String",
            "Char",
            "VerbatimString",
            "SpecialString",
            "SpecialChar",
        ),
    ),
    TokenCategory(
        id=CATEGORY_FUNCTION,
        label="Function",
        scopes=("entity.name.function", "support.function"),
        highlight_tokens=("Function",),
    ),
    TokenCategory(
        id=CATEGORY_COMMENT,
        label="Comment",
        scopes=("comment",),
        highlight_tokens=(
            "Comment",
            "Documentation",
            "CommentVar",
            "Annotation",
        ),
    ),
    TokenCategory(
        id=CATEGORY_TYPE,
        label="Type",
        scopes=("entity.name.type", "storage.type", "support.type"),
        highlight_tokens=("DataType",),
    ),
    TokenCategory(
        id=CATEGORY_VARIABLE,
        label="Variable",
        scopes=("variable", "variable.parameter"),
        highlight_tokens=("Variable",),
    ),
    TokenCategory(
        id=CATEGORY_NUMBER,
        label="Number",
        scopes=("constant.numeric",),
        highlight_tokens=("DecVal", "BaseN", "Float"),
    ),
    TokenCategory(
        id=CATEGORY_CONSTANT,
        label="Constant",
        scopes=("constant.language",),
        highlight_tokens=("Constant", "BuiltIn"),
    ),
    TokenCategory(
        id=CATEGORY_OPERATOR,
        label="Operator",
        scopes=("keyword.operator",),
        highlight_tokens=("Operator",),
    ),
    TokenCategory(
        id=CATEGORY_IMPORT,
        label="Import",
        scopes=("keyword.import", "keyword.control.import"),
        highlight_tokens=("Import", "Preprocessor"),
    ),
    TokenCategory(
        id=CATEGORY_ATTRIBUTE,
        label="Attribute",
        scopes=(
            "entity.other.attribute-name",
            "entity.other.inherited-class",
        ),
        highlight_tokens=("Attribute",),
    ),
)

GLOBAL_SETTINGS: Final[tuple[GlobalSetting, ...]] = (
    GlobalSetting(id=GLOBAL_BACKGROUND, label="Background"),
    GlobalSetting(id=GLOBAL_FOREGROUND, label="Foreground"),
)

# Every skylighting token a pandoc theme may style, mapped or not.
ALL_HIGHLIGHT_TOKENS: Final[tuple[str, ...]] = (
    "Alert",
    "Annotation",
    "Attribute",
    "BaseN",
    "BuiltIn",
    "Char",
    "Comment",
    "CommentVar",
    "Constant",
    "ControlFlow",
    "DataType",
    "DecVal",
    "Documentation",
    "Error",
    "Extension",
    "Float",
    "Function",
    "Import",
    "Information",
    "Keyword",
    "Operator",
    "Other",
    "Preprocessor",
    "RegionMarker",
    "SpecialChar",
    "SpecialString",
    "String",
    "Variable",
    "VerbatimString",
    "Warning",
)

_CATEGORIES_BY_ID: Final[dict[str, TokenCategory]] = {
    category.id: category for category in TOKEN_CATEGORIES
}


def list_categories() -> tuple[TokenCategory, ...]:
    """Return every token category in registry order."""

    return TOKEN_CATEGORIES


def category_ids() -> tuple[str, ...]:
    """Return the identifiers of every token category in registry order."""

    return tuple(category.id for category in TOKEN_CATEGORIES)


def get_category(category_id: str) -> TokenCategory:
    """Return the category registered under ``category_id``."""

    try:
        return _CATEGORIES_BY_ID[category_id]
    except KeyError:
        raise KeyError(f"Unknown token category '{category_id}'") from None


def scope_identifiers_of(category_id: str) -> tuple[str, ...]:
    """Return the TextMate scopes that represent ``category_id``."""

    return get_category(category_id).scopes


def highlight_tokens_of(category_id: str) -> tuple[str, ...]:
    """Return the skylighting tokens that represent ``category_id``."""

    return get_category(category_id).highlight_tokens


def global_ids() -> tuple[str, ...]:
    """Return the identifiers of the global settings."""

    return tuple(setting.id for setting in GLOBAL_SETTINGS)
