from typing import Any

import yaml

from jsonview.core.models.options import EncodeOptions
from jsonview.core.ports.encoder import Encoder


class YamlEncoder(Encoder):
    """
    PyYAML implementation of the Encoder interface.

    Only safe YAML is produced: values outside the YAML core schema make
    ``yaml.safe_dump`` raise a RepresenterError.
    """

    def __init__(self, options: EncodeOptions | None = None) -> None:
        self._options = options or EncodeOptions()

    @property
    def options(self) -> EncodeOptions:
        return self._options

    def encode(self, data: Any, options: EncodeOptions | None = None) -> str:
        opts = options if options is not None else self._options

        return yaml.safe_dump(
            data,
            sort_keys=opts.sort_keys,
            allow_unicode=not opts.ensure_ascii,
            default_flow_style=not opts.pretty,
            indent=opts.indent if opts.pretty else None,
        )
