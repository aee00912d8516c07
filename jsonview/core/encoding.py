import contextlib
import logging
from collections.abc import Callable
from typing import Any, Generator

from jsonview.core.errors import EncoderConfigError
from jsonview.core.models.options import EncodeOptions
from jsonview.core.ports.encoder import Encoder
from jsonview.infra.json_encoder import JsonEncoder

EncodeFunc = Callable[[Any, EncodeOptions | None], str]

_logger = logging.getLogger("jsonview.encoding")


class CallableEncoder(Encoder):
    """Adapts a plain ``(data, options) -> str`` function to the Encoder interface."""

    def __init__(self, func: EncodeFunc) -> None:
        self._func = func

    @property
    def func(self) -> EncodeFunc:
        return self._func

    def encode(self, data: Any, options: EncodeOptions | None = None) -> str:
        return self._func(data, options)

    def __repr__(self) -> str:
        return f"CallableEncoder({self._func!r})"


def as_encoder(encoder: Encoder | EncodeFunc) -> Encoder:
    if isinstance(encoder, (str, bytes)):
        raise EncoderConfigError(
            f"Encoders are bound as objects, not by name ({encoder!r}); "
            "see jsonview.bootstrap.deps.build_encoder"
        )
    if isinstance(encoder, type):
        raise EncoderConfigError(
            f"Expected an encoder instance, got the class {encoder.__name__}"
        )
    if callable(getattr(encoder, "encode", None)):
        return encoder
    if callable(encoder):
        return CallableEncoder(encoder)
    raise EncoderConfigError(
        f"Expected an Encoder or a callable, got {type(encoder).__name__}"
    )


# Process-wide slot, read at render time. Reassignment is last-write-wins.
_default_encoder: Encoder = JsonEncoder()


def get_default_encoder() -> Encoder:
    return _default_encoder


def set_default_encoder(encoder: Encoder | EncodeFunc) -> Encoder:
    """
    Replace the process-wide default encoder.

    Returns the previously installed encoder so callers can restore it.
    """
    global _default_encoder

    previous = _default_encoder
    _default_encoder = as_encoder(encoder)
    _logger.debug(f"Default encoder set to {_default_encoder!r}")

    return previous


def reset_default_encoder() -> None:
    set_default_encoder(JsonEncoder())


@contextlib.contextmanager
def use_encoder(encoder: Encoder | EncodeFunc) -> Generator[Encoder, None, None]:
    previous = set_default_encoder(encoder)

    try:
        yield get_default_encoder()
    finally:
        set_default_encoder(previous)
