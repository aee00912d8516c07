import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class EncodeOptions:
    """
    Formatting options understood by every bundled encoder.

    The defaults produce compact output that keeps mapping keys in
    declaration order, e.g. ``{"name":"Ada","age":30}``.
    """

    pretty: bool = False
    """Emit multi-line, indented output."""

    indent: int = 2
    """Indentation width, only used when ``pretty`` is set."""

    sort_keys: bool = False
    """Sort mapping keys instead of keeping insertion order."""

    ensure_ascii: bool = False
    """Escape every non-ASCII character."""

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

    def merge(self, **overrides) -> "EncodeOptions":
        return dataclasses.replace(self, **overrides)
