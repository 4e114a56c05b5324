"""pgddl - Render PostgreSQL CREATE TABLE statements from an in-memory schema."""

from __future__ import annotations

import logging

from pgddl._errors import InvalidFieldNameError, ReservedFieldNameError, SchemaError
from pgddl.field import Field, FieldOptions, FieldType, SystemField
from pgddl.schema import Schema, SchemaBuilder, create_table

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "create_table",
    "Field",
    "FieldOptions",
    "FieldType",
    "SystemField",
    "Schema",
    "SchemaBuilder",
    "SchemaError",
    "InvalidFieldNameError",
    "ReservedFieldNameError",
    "__version__",
]
