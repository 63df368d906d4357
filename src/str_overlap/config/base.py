from typing import Literal
from typing import override

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import PydanticBaseSettingsSource
from pydantic_settings import SettingsConfigDict
from pydantic_settings import TomlConfigSettingsSource

from .debug import DebugConfig


class Config(BaseSettings):
    left: str = ""
    right: str = ""
    direction: Literal["end", "start"] = "end"
    mode: Literal["overlap", "merge"] = "overlap"
    min_overlap: int = Field(default=1, ge=1)
    debug: DebugConfig = Field(default_factory=DebugConfig)

    model_config = SettingsConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        env_prefix="STR_OVERLAP_",
        env_nested_delimiter="__",
        toml_file="overlap.toml",
    )

    @classmethod
    @override
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls))
