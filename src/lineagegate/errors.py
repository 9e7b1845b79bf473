"""LineageGate errors."""


class LineageGateError(Exception):
    """Base error for LineageGate operations."""

    def __init__(self, message: str, code: str = "LINEAGEGATE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class MetadataTypeMismatchError(LineageGateError, TypeError):
    """Metadata entry does not have the expected shape."""

    def __init__(self, key: str, expected: str, actual: object):
        super().__init__(
            f"Metadata entry '{key}' must be {expected}, got {type(actual).__name__}",
            "METADATA_TYPE_MISMATCH",
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class UnknownEventTypeError(LineageGateError, ValueError):
    """Stored event type matches no known lineage event type."""

    def __init__(self, raw_value: str | None):
        super().__init__(f"Unknown lineage event type: {raw_value!r}", "UNKNOWN_EVENT_TYPE")
        self.raw_value = raw_value


class MalformedNumberError(LineageGateError, ValueError):
    """Stored numeric attribute cannot be parsed."""

    def __init__(self, attribute: str, raw_value: str | None):
        super().__init__(
            f"Attribute {attribute} is not a valid number: {raw_value!r}",
            "MALFORMED_NUMBER",
        )
        self.attribute = attribute
        self.raw_value = raw_value


class LineageValidationError(LineageGateError):
    """Event cannot be checked against the requirements registry."""

    def __init__(self, raw_value: str | None):
        super().__init__(
            f"Cannot validate lineage event: invalid event type '{raw_value}'",
            "INVALID_LINEAGE_EVENT",
        )
        self.raw_value = raw_value


class EventFrozenError(LineageGateError):
    """Event was modified after being handed to a publisher."""

    def __init__(self, field: str):
        super().__init__(
            f"Cannot modify {field}: lineage event is frozen",
            "EVENT_FROZEN",
        )
        self.field = field
