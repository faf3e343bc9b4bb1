import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from slugroute.core.exceptions import ConfigurationError
from slugroute.core.types import RuleName

CONFIG_FILENAME = ".slugroute.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination.get(key, {})), dict(value))
        else:
            destination[key] = value
    return destination


class RuleSettings(BaseModel):
    """Which addressing strategy the site uses, and its options."""

    active: RuleName = Field(
        default=RuleName.CATEGORY_AND_ARTICLE_NAME_EXT,
        description="Addressing strategy applied to every request",
    )
    suffix: str | None = Field(
        default=".html",
        description="File suffix appended by the *Ext strategies",
    )


class LanguageSettings(BaseModel):
    """Language slugs that may prefix a URL.

    ``available`` maps a URL slug (``en``) to the language id stored on
    articles. The ``default`` language is never written into URLs.
    """

    available: dict[str, int] = Field(default_factory=dict, description="Language slug to language id")
    default: str | None = Field(default=None, description="Slug of the language served without prefix")

    @property
    def slugs(self) -> list[str]:
        return list(self.available)

    def slug_for(self, language_id: int | None) -> str | None:
        """URL prefix for an article language, None for the default or unknown ones."""
        if language_id is None:
            return None
        for slug, available_id in self.available.items():
            if available_id == language_id:
                return None if slug == self.default else slug
        return None


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    db_path: Path = Field(default=Path(".slugroute/site.duckdb"), description="DuckDB file path")

    @property
    def abs_db_path(self) -> Path:
        if self.db_path.is_absolute():
            return self.db_path
        return self.site_root / self.db_path


class SlugrouteConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern:
    SLUGROUTE_SECTION__KEY (e.g., SLUGROUTE_RULES__ACTIVE)
    """

    rules: RuleSettings = Field(default_factory=RuleSettings)
    languages: LanguageSettings = Field(default_factory=LanguageSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="SLUGROUTE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "SlugrouteConfig":
        """Loads configuration from .slugroute.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (SLUGROUTE_SECTION__KEY)
        2. Config file (.slugroute.toml)
        3. Defaults

        Raises:
            ConfigurationError: If the file or the environment holds invalid values.
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {config_file}: {exc}"
                raise ConfigurationError(msg) from exc

        # pydantic-settings ranks init kwargs above the environment, so the
        # environment is read separately and merged on top of the file.
        try:
            env_settings = cls().model_dump(exclude_unset=True)
            merged_config = _deep_merge(file_settings, env_settings)
            merged_config.setdefault("paths", {})["site_root"] = root_path
            return cls.model_validate(merged_config)
        except ValidationError as exc:
            msg = f"Invalid slugroute configuration: {exc}"
            raise ConfigurationError(msg) from exc
