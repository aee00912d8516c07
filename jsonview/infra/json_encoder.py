import base64
import json
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from jsonview.core.models.options import EncodeOptions
from jsonview.core.ports.encoder import Encoder


class ExtendedJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that additionally supports:
    - datetime, date and time (ISO 8601)
    - Decimal and UUID (as strings)
    - bytes (encoded as base64)
    - set and frozenset (as lists)
    """

    def default(self, obj):
        if isinstance(obj, (datetime, date, time)):
            return obj.isoformat()
        if isinstance(obj, (Decimal, uuid.UUID)):
            return str(obj)
        if isinstance(obj, bytes):
            return base64.b64encode(obj).decode()
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        return super().default(obj)


class JsonEncoder(Encoder):
    """
    Standard library ``json`` implementation of the Encoder interface.

    Compact output uses no whitespace at all between tokens, pretty
    output uses ``indent`` spaces and a single space after colons.
    """

    COMPACT_SEPARATORS = (",", ":")
    PRETTY_SEPARATORS = (",", ": ")

    def __init__(
        self,
        options: EncodeOptions | None = None,
        cls: type[json.JSONEncoder] = json.JSONEncoder
    ) -> None:
        self._options = options or EncodeOptions()
        self._cls = cls

    @property
    def options(self) -> EncodeOptions:
        return self._options

    def encode(self, data: Any, options: EncodeOptions | None = None) -> str:
        opts = options if options is not None else self._options

        if opts.pretty:
            indent, separators = opts.indent, self.PRETTY_SEPARATORS
        else:
            indent, separators = None, self.COMPACT_SEPARATORS

        return json.dumps(
            data,
            cls=self._cls,
            indent=indent,
            separators=separators,
            sort_keys=opts.sort_keys,
            ensure_ascii=opts.ensure_ascii,
        )
