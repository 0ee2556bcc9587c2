"""Configuration loader for pathtext."""

from __future__ import annotations

import logging
import os
import tempfile
import tomllib
from pathlib import Path

import tomlkit
from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathtext.errors import ConfigError
from pathtext.platforms import CURRENT_PLATFORM, PlatformFamily, parse_platform_family

log = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the config directory for pathtext (config.toml)."""
    override = os.environ.get("PATHTEXT_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("pathtext"))


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.toml"


class TransformConfig(BaseModel):
    """Settings shared by the path transforms."""

    model_config = ConfigDict(frozen=True)

    platform: PlatformFamily = Field(
        default=CURRENT_PLATFORM,
        description="Path conventions used by escape_filename and decode_uri",
    )

    @field_validator("platform", mode="before")
    @classmethod
    def validate_platform(cls, value: object) -> PlatformFamily:
        """Gracefully coerce invalid values to the detected platform."""
        if isinstance(value, PlatformFamily):
            return value
        if isinstance(value, str) and (family := parse_platform_family(value)) is not None:
            return family
        log.warning("Unknown platform %r in config, using %s", value, CURRENT_PLATFORM)
        return CURRENT_PLATFORM


class PathTextConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    transform: TransformConfig = Field(default_factory=TransformConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> PathTextConfig:
        """Load configuration from a TOML file, or use defaults when it is missing."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(config_path, f"invalid TOML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(config_path, str(exc)) from exc

    def save(self, path: Path | None = None) -> Path:
        """Serialize the config to a TOML file and return the path written.

        Raises:
            ConfigError: The file or its directory cannot be written.
        """
        if path is None:
            path = get_config_path()

        doc = tomlkit.document()
        transform_table = tomlkit.table()
        for key, value in self.transform.model_dump(mode="json").items():
            if value is not None:
                transform_table[key] = value
        doc["transform"] = transform_table

        _replace_file(path, tomlkit.dumps(doc))
        return path


def _replace_file(path: Path, content: str) -> None:
    """Write *content* to *path* through a sibling temp file and a rename."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise ConfigError(path, f"cannot write config: {exc}") from exc

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        tmp.replace(path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise ConfigError(path, f"cannot write config: {exc}") from exc
    log.debug("Wrote config to %s", path)


_config = PathTextConfig()


def get_config() -> PathTextConfig:
    """Return the process-wide configuration."""
    return _config


def set_config(config: PathTextConfig) -> None:
    """Replace the process-wide configuration."""
    global _config
    _config = config


def current_platform() -> PlatformFamily:
    """Platform family selected by the process-wide configuration."""
    return _config.transform.platform
