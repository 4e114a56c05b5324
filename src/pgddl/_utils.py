"""Identifier validation helpers."""

from __future__ import annotations

import re

from pgddl._constants import MAX_POSTGRESQL_IDENTIFIER_LENGTH
from pgddl._errors import (
    ERR_MSG_EMPTY_FIELD_NAME,
    ERR_MSG_FIELD_NAME_TOO_LONG,
    ERR_MSG_INVALID_FIELD_NAME,
    ERR_MSG_RESERVED_KEYWORD,
    InvalidFieldNameError,
)

IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

RESERVED_SQL_KEYWORDS: set[str] = {
    "all", "alter", "and", "any", "array", "as", "asc", "between",
    "by", "case", "cast", "check", "column", "constraint", "create",
    "cross", "current", "current_date", "current_time", "current_timestamp",
    "current_user", "default", "delete", "desc", "distinct", "drop",
    "else", "end", "except", "exists", "false", "for", "foreign",
    "from", "full", "grant", "group", "having", "in", "index", "inner",
    "insert", "intersect", "into", "is", "join", "left", "like", "limit",
    "not", "null", "offset", "on", "or", "order", "outer", "primary",
    "references", "right", "select", "session_user", "set", "some",
    "table", "then", "to", "true", "union", "unique", "update", "user",
    "using", "values", "when", "where", "with",
}


def validate_identifier(name: str) -> None:
    """Validate a SQL column identifier."""
    if not name:
        raise InvalidFieldNameError(
            ERR_MSG_EMPTY_FIELD_NAME,
            "empty field name provided",
        )
    if len(name) > MAX_POSTGRESQL_IDENTIFIER_LENGTH:
        raise InvalidFieldNameError(
            ERR_MSG_FIELD_NAME_TOO_LONG,
            f"field name '{name}' exceeds {MAX_POSTGRESQL_IDENTIFIER_LENGTH} characters",
        )
    if not IDENTIFIER_RE.match(name):
        raise InvalidFieldNameError(
            ERR_MSG_INVALID_FIELD_NAME,
            f"field name '{name}' contains invalid characters",
        )
    if name.lower() in RESERVED_SQL_KEYWORDS:
        raise InvalidFieldNameError(
            ERR_MSG_RESERVED_KEYWORD,
            f"field name '{name}' is a reserved SQL keyword",
        )


# Unicode White_Space property; unlike str.isspace() it excludes U+001C..U+001F
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def normalize_name(name: str) -> str:
    """Fold a name for reserved-name comparison."""
    return name.strip(WHITESPACE_CHARS).lower()
