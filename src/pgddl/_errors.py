"""Exception hierarchy for strict schema construction."""


class SchemaError(Exception):
    """Base exception for schema construction errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFieldNameError(SchemaError):
    """Raised when a field name is invalid or empty."""


class ReservedFieldNameError(InvalidFieldNameError):
    """Raised when a field name collides with a system field."""


# Sanitized user-facing error message constants
ERR_MSG_EMPTY_FIELD_NAME = "field name cannot be empty"
ERR_MSG_FIELD_NAME_TOO_LONG = "field name too long"
ERR_MSG_INVALID_FIELD_NAME = "invalid field name format"
ERR_MSG_RESERVED_KEYWORD = "field name is a reserved SQL keyword"
ERR_MSG_RESERVED_SYSTEM_FIELD = "field name is reserved for a system field"
