class MockClientError(Exception):
    """Base class for faults raised by the test-double client framework itself."""

    pass


class PayloadSerializationError(MockClientError):
    """Raised when a payload cannot be converted to the sender's wire encoding."""

    def __init__(self, payload_type: type, encoding: str, reason: str) -> None:
        self.payload_type = payload_type
        self.encoding = encoding
        super().__init__(
            f"Cannot serialize payload of type {payload_type.__name__} to {encoding}: {reason}"
        )


class VerbConstructionError(MockClientError):
    """
    Raised when a verb cannot be built from its registered constructor. This is a
    programming error: the verb was registered without the (transport) -> Verb shape.
    """

    def __init__(self, verb: object, reason: str) -> None:
        self.verb = verb
        super().__init__(f"Cannot construct verb {verb!r}: {reason}")


class ConfigurationError(MockClientError):
    """Raised when harness configuration cannot be read or validated."""

    pass
