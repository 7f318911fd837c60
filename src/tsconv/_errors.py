"""Exception hierarchy for timestamp conversion."""


class TimestampError(Exception):
    """Base exception for timestamp conversion errors.

    Provides dual messaging: a user-facing message printed by the CLI and
    internal details for debug logging.
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


class InputParseError(TimestampError):
    """Raised when input text is not a valid integer or RFC 3339 timestamp."""


class InstantRangeError(TimestampError):
    """Raised when a seconds/nanosecond pair is not a valid instant."""


# User-facing error message constants
ERR_MSG_EMPTY_INTEGER = "cannot parse integer from empty string"
ERR_MSG_INVALID_DIGIT = "invalid digit found in string"
ERR_MSG_INTEGER_TOO_LARGE = "number too large to fit in target type"
ERR_MSG_INTEGER_TOO_SMALL = "number too small to fit in target type"
ERR_MSG_MISSING_VALUE = "missing input value"
ERR_MSG_NANOSECOND_RANGE = "out of range integral type conversion attempted"
ERR_MSG_SECONDS_RANGE = "timestamp out of range for a calendar date"
ERR_MSG_INVALID_RFC3339 = "invalid RFC 3339 timestamp"
