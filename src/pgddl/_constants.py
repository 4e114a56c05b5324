"""Rendering constants for CREATE TABLE generation."""

MAX_POSTGRESQL_IDENTIFIER_LENGTH = 63
"""Longest identifier PostgreSQL keeps without truncation (NAMEDATALEN - 1)."""

COLUMN_SEPARATOR = ", "
"""Separator between column definitions and constraint clauses."""

UNIQUE_CONSTRAINT_SUFFIX = "_key"
"""Suffix PostgreSQL itself uses when naming unique constraints."""
