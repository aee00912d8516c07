class JsonViewError(Exception):
    """Base class for every error raised by jsonview itself."""


class AttributesNotImplementedError(JsonViewError, NotImplementedError):
    """Raised when a serializer does not provide its attributes()."""

    def __init__(self, serializer_cls: type):
        super().__init__(
            f"{serializer_cls.__name__} must implement attributes()"
        )
        self.serializer_cls = serializer_cls


class EncoderConfigError(JsonViewError, ValueError):
    """Raised when an encoder cannot be bound or built from configuration."""
