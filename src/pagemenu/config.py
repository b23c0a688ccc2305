"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (PAGEMENU__MENU__LIST_OPEN="<OL>")
  3. pagemenu.yaml          (searched in cwd, then platform config dir)
  4. Hardcoded defaults

The config file is optional. Every field has a default except the target
element list, which must come from somewhere before a page can be processed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_CONFIG_FILENAME = "pagemenu.yaml"


def _find_config_file() -> str | None:
    """Return the path of the first pagemenu.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILENAME),
        Path(platformdirs.user_config_dir("pagemenu")) / _CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class MenuSettings(BaseModel):
    """Markup wrapped around the whole menu and around each entry."""

    model_config = ConfigDict(frozen=True)

    list_open: str = "<UL>"
    list_close: str = "</UL>"
    item_open: str = "<LI>"
    item_close: str = "</LI>"


class InjectorSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    targets: list[str] = []
    unique_ids: bool = False
    preserve_whitespace: bool = False


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: PAGEMENU__INJECTOR__UNIQUE_IDS=true
        env_prefix="PAGEMENU__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    menu: MenuSettings = MenuSettings()
    injector: InjectorSettings = InjectorSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
