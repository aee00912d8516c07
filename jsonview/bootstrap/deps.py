import json
import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from jsonview.bootstrap.config.settings import JsonViewSettings
from jsonview.core.encoding import set_default_encoder
from jsonview.core.errors import EncoderConfigError
from jsonview.core.helpers.utils import setup_logging
from jsonview.core.ports.encoder import Encoder
from jsonview.infra.json_encoder import JsonEncoder
from jsonview.infra.yaml_encoder import YamlEncoder

ENCODERS: dict[str, Callable[..., Encoder]] = {
    "json": JsonEncoder,
    "yaml": YamlEncoder,
}


@lru_cache
def get_settings(configfile: str | Path | None = None) -> JsonViewSettings:
    try:
        if configfile is not None:
            return JsonViewSettings.from_configfile(configfile)
        return JsonViewSettings()
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def build_encoder(settings: JsonViewSettings) -> Encoder:
    try:
        encoder_cls = ENCODERS[settings.encoder]
    except KeyError:
        raise EncoderConfigError(f"Unknown encoder backend: {settings.encoder!r}") from None

    return encoder_cls(options=settings.to_options())


def configure(
    settings: JsonViewSettings | None = None,
    configfile: str | Path | None = None
) -> Encoder:
    """
    Apply configuration to the running process: set up logging and
    install the configured encoder as the default. Returns that encoder.

    Without explicit settings they are loaded, from ``configfile`` when given.
    """
    settings = settings or get_settings(configfile)
    setup_logging(settings.log_level)

    encoder = build_encoder(settings)
    set_default_encoder(encoder)
    logging.getLogger("jsonview.bootstrap").info(
        f"Configured default encoder: {settings.encoder}"
    )

    return encoder
