"""Table schema and CREATE TABLE rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from io import StringIO

from pgddl._constants import COLUMN_SEPARATOR, UNIQUE_CONSTRAINT_SUFFIX
from pgddl._errors import ERR_MSG_RESERVED_SYSTEM_FIELD, ReservedFieldNameError
from pgddl._utils import validate_identifier
from pgddl.field import Field, FieldOptions, FieldType, SystemField

logger = logging.getLogger(__name__)


class Schema:
    """An in-memory table definition: a name plus ordered user fields.

    Fields are only ever appended. Names reserved for system fields are
    dropped silently by :meth:`add_field`, so a Schema can always be
    built up fluently; use :meth:`add_field_strict` to get an error instead.
    """

    def __init__(self, table_name: str = "") -> None:
        self.table_name = table_name
        self._fields: list[Field] = []

    @property
    def fields(self) -> list[Field]:
        return list(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def find_field(self, name: str) -> Field | None:
        for f in self._fields:
            if f.name == name:
                return f
        return None

    def add_field(
        self,
        name: str,
        type: FieldType,
        options: FieldOptions | None = None,
    ) -> None:
        """Append a field unless its name belongs to a system field.

        Args:
            name: Column name. Compared against ``id``, ``inserted_at`` and
                ``updated_at`` ignoring case and surrounding whitespace.
            type: Column type.
            options: Column constraints. Defaults to ``FieldOptions()``.
        """
        if SystemField.is_reserved(name):
            logger.debug("ignoring field %r: name is reserved for a system field", name)
            return
        self._fields.append(Field(name, type, options))

    def add_field_strict(
        self,
        name: str,
        type: FieldType,
        options: FieldOptions | None = None,
    ) -> None:
        """Append a field, raising instead of ignoring bad names.

        Raises:
            ReservedFieldNameError: If the name belongs to a system field.
            InvalidFieldNameError: If the name is not a plain SQL identifier.
        """
        if SystemField.is_reserved(name):
            raise ReservedFieldNameError(
                ERR_MSG_RESERVED_SYSTEM_FIELD,
                f"field name {name!r} collides with system field in table {self.table_name!r}",
            )
        validate_identifier(name)
        self._fields.append(Field(name, type, options))

    def unique_constraints(self) -> list[str]:
        """Return one ``CONSTRAINT ... UNIQUE`` clause per unique field, in field order."""
        return [
            f"CONSTRAINT {self.table_name}_{f.name}{UNIQUE_CONSTRAINT_SUFFIX} UNIQUE ({f.name})"
            for f in self._fields
            if f.is_unique
        ]

    def to_sql(self) -> str:
        """Render the CREATE TABLE statement.

        System fields come first, then user fields in insertion order, then
        the unique constraints. With no user fields the system fields keep
        their trailing separator, giving ``..., );``.
        """
        if not self._fields:
            logger.warning(
                "rendering table %r with no user fields leaves a dangling separator",
                self.table_name,
            )

        w = StringIO()
        w.write(f"CREATE TABLE {self.table_name} (")

        for system_field in SystemField.iterator():
            w.write(system_field.to_sql())
            w.write(COLUMN_SEPARATOR)

        last = len(self._fields) - 1
        for index, f in enumerate(self._fields):
            f.write_sql(w)
            if index < last:
                w.write(COLUMN_SEPARATOR)

        constraints = self.unique_constraints()
        if constraints:
            w.write(COLUMN_SEPARATOR)
            w.write(COLUMN_SEPARATOR.join(constraints))

        w.write(");")
        return w.getvalue()


class SchemaBuilder:
    """Chainable wrapper around a :class:`Schema`."""

    def __init__(self) -> None:
        self.schema = Schema()

    def with_table_name(self, table_name: str) -> SchemaBuilder:
        self.schema.table_name = table_name
        return self

    def with_field(
        self,
        name: str,
        type: FieldType,
        options: FieldOptions | None = None,
    ) -> SchemaBuilder:
        self.schema.add_field(name, type, options)
        return self

    def build(self) -> Schema:
        return self.schema


def create_table(
    table_name: str,
    fields: Iterable[tuple[str, FieldType] | tuple[str, FieldType, FieldOptions | None]],
) -> str:
    """Render a CREATE TABLE statement in one call.

    Args:
        table_name: Name of the table.
        fields: ``(name, type)`` or ``(name, type, options)`` tuples, in
            column order. Reserved names are dropped as in
            :meth:`Schema.add_field`.

    Returns:
        The CREATE TABLE statement.
    """
    schema = Schema(table_name)
    for spec in fields:
        schema.add_field(*spec)
    return schema.to_sql()
