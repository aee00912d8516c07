from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from jsonview.bootstrap.config.loader import get_configfile
from jsonview.core.models.options import EncodeOptions


class EncodeSettings(BaseModel):
    pretty: Annotated[
        bool,
        Field(
            description="Emit multi-line, indented documents by default.",
            default=False
        )
    ]

    indent: Annotated[
        int,
        Field(
            description="Indentation width used when pretty output is enabled.",
            default=2,
            ge=0
        )
    ]

    sort_keys: Annotated[
        bool,
        Field(
            description=(
                "Sort mapping keys alphabetically.\n"
                "When disabled, keys keep the order in which attributes() declares them."
            ),
            default=False
        )
    ]

    ensure_ascii: Annotated[
        bool,
        Field(
            description="Escape every non-ASCII character in the output.",
            default=False
        )
    ]


class JsonViewSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JSONVIEW_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    encoder: Annotated[
        Literal["json", "yaml"],
        Field(
            description=(
                "Backend installed as the process-wide default encoder.\n"
                "'json' uses the standard library json module, 'yaml' uses PyYAML."
            ),
            default="json"
        )
    ]

    options: Annotated[
        EncodeSettings,
        Field(
            description="Default formatting applied when render() gets no options.",
            default_factory=EncodeSettings
        )
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity for the jsonview loggers.",
            default="WARNING"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Priority: init kwargs > environment > YAML file
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)

        configfile = get_configfile(settings_cls.model_config.get("yaml_file"))
        if configfile is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=configfile),)

        return sources

    @classmethod
    def from_configfile(cls, path: str | Path) -> "JsonViewSettings":
        """
        Load settings with an explicit YAML file, which takes priority over
        JSONVIEWCONFIG and the working directory default.
        """
        class FileSettings(cls):
            model_config = SettingsConfigDict(yaml_file=path)

        return FileSettings()

    def to_options(self) -> EncodeOptions:
        return EncodeOptions(**self.options.model_dump())
