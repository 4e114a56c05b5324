"""Column types, column options and the system-managed columns."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from io import StringIO

from pgddl._utils import normalize_name


class FieldType(enum.StrEnum):
    """Semantic column type; the value is the PostgreSQL type keyword."""

    INTEGER = "BIGINT"
    DOUBLE = "DOUBLE PRECISION"
    SERIAL = "BIGSERIAL"
    CHAR = "VARCHAR(255)"
    TEXT = "TEXT"
    TIMESTAMP = "TIMESTAMP WITHOUT TIME ZONE"
    DATE = "DATE"
    TIME = "TIME"
    BOOLEAN = "BOOLEAN"
    JSON = "JSON"
    UUID = "UUID"

    @property
    def sql_keyword(self) -> str:
        return self.value


# Types whose DEFAULT literal is written without quotes
_UNQUOTED_DEFAULT_TYPES: frozenset[FieldType] = frozenset({
    FieldType.INTEGER,
    FieldType.SERIAL,
    FieldType.DOUBLE,
    FieldType.BOOLEAN,
})


class SystemField(enum.StrEnum):
    """Columns every table receives automatically, in render order."""

    ID = "id"
    INSERTED_AT = "inserted_at"
    UPDATED_AT = "updated_at"

    @property
    def column_name(self) -> str:
        return self.value

    @classmethod
    def iterator(cls) -> Iterator[SystemField]:
        """Return a fresh iterator over the system fields in render order."""
        return iter(cls)

    @classmethod
    def names(cls) -> list[str]:
        """Return the system column names: ``id``, ``inserted_at``, ``updated_at``."""
        return [f.column_name for f in cls.iterator()]

    @classmethod
    def is_reserved(cls, name: str) -> bool:
        """Check whether ``name`` collides with a system column.

        The comparison ignores case and surrounding whitespace, so
        ``" ID "`` is reserved as well.
        """
        return normalize_name(name) in cls.names()

    def to_sql(self) -> str:
        return f"{self.column_name} {_SYSTEM_FIELD_SQL[self]}"


# Fixed column definitions; not configurable through FieldOptions
_SYSTEM_FIELD_SQL: dict[SystemField, str] = {
    SystemField.ID: "UUID PRIMARY KEY DEFAULT gen_random_uuid()",
    SystemField.INSERTED_AT: "TIMESTAMP without time zone NOT NULL",
    SystemField.UPDATED_AT: "TIMESTAMP without time zone NOT NULL",
}


@dataclass(frozen=True)
class FieldOptions:
    """Per-column constraints.

    ``default`` holds the literal exactly as it should appear in the
    DEFAULT clause. It is not escaped: a value containing a single quote
    produces invalid SQL for quoted types, and keeping identifiers and
    literals SQL-safe is the caller's job.
    """

    unique: bool = False
    not_null: bool = False
    default: str | None = None

    @classmethod
    def defaults(cls) -> FieldOptions:
        """Return options with every constraint switched off."""
        return cls()

    def clone(self) -> FieldOptions:
        return replace(self)


@dataclass(frozen=True)
class Field:
    """A user-defined column.

    Passing ``options=None`` is the same as passing ``FieldOptions()``;
    a constructed Field always carries an options value.
    """

    name: str
    type: FieldType
    options: FieldOptions | None = field(default_factory=FieldOptions)

    def __post_init__(self) -> None:
        if self.options is None:
            object.__setattr__(self, "options", FieldOptions.defaults())

    @property
    def is_unique(self) -> bool:
        return self.options.unique

    def write_sql(self, w: StringIO) -> None:
        w.write(f"{self.name} {self.type.sql_keyword}")
        if self.options.not_null:
            w.write(" NOT NULL")
        if self.options.default is not None:
            if self.type in _UNQUOTED_DEFAULT_TYPES:
                w.write(f" DEFAULT {self.options.default}")
            else:
                w.write(f" DEFAULT '{self.options.default}'")

    def to_sql(self) -> str:
        """Render the column definition, e.g. ``age BIGINT NOT NULL DEFAULT 5``."""
        w = StringIO()
        self.write_sql(w)
        return w.getvalue()
