from typing import Protocol, Any

from jsonview.core.models.options import EncodeOptions


class Encoder(Protocol):
    """
    Defines the interface for turning attribute structures into text.

    Implementations must be:
    - pure (no side effects)
    - safe to call from whatever thread renders
    - honest about failures: unsupported values raise, never get dropped
    """

    def encode(self, data: Any, options: EncodeOptions | None = None) -> str:
        """Encode plain Python data into a string. None means encoder defaults."""
