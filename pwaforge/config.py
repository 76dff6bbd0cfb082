"""Configuration loader with type-safe dataclasses."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


PRODUCTION_MODE = "production"


@dataclass(frozen=True)
class PwaConfig:
    """Options describing the installable app.

    Mode:
    - mode: "production" prefixes precache entries and the registration scope
            with ``scope``. Any other value builds for serving from "/".

    Optional fields:
    - short_name: Defaults to ``name`` in the manifest.
    - background_color: Defaults to ``theme_color`` in the manifest.
    """

    name: str
    theme_color: str
    tag: str
    description: str = ""
    mode: str = "development"
    scope: str = ""
    short_name: str | None = None
    background_color: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigError("App name cannot be empty")
        if not self.theme_color:
            raise ConfigError("Theme color cannot be empty")
        if not self.tag:
            raise ConfigError("Cache tag cannot be empty")
        # Scope is a bare path segment; "/myapp/" and "myapp" are equivalent.
        object.__setattr__(self, "scope", self.scope.strip("/"))
        if self.is_production and not self.scope:
            raise ConfigError("Scope is required in production mode")

    @property
    def is_production(self) -> bool:
        return self.mode == PRODUCTION_MODE


@dataclass(frozen=True)
class BuildConfig:
    """Where sources are read from and the compiled assets written to."""

    source_dir: str = "."
    output_dir: str = "dist"

    def __post_init__(self) -> None:
        if not self.source_dir:
            raise ConfigError("Source directory cannot be empty")
        if not self.output_dir:
            raise ConfigError("Output directory cannot be empty")


@dataclass(frozen=True)
class Config:
    """Root configuration object."""

    pwa: PwaConfig
    build: BuildConfig = field(default_factory=BuildConfig)


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        raise ConfigError(f"Missing required field '{key}'")
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, (str, int, float)):
        raise ConfigError(f"'{key}' must be a string")
    return str(value)


def _parse_pwa_config(data: dict) -> PwaConfig:
    # YAML reads bare tags like "1" or "2.0" as numbers
    tag = data.get("tag")
    if isinstance(tag, (int, float)):
        tag = str(tag)
    if tag is None:
        raise ConfigError("Missing required field 'tag'")
    if not isinstance(tag, str):
        raise ConfigError("'tag' must be a string")

    return PwaConfig(
        name=_require_str(data, "name"),
        theme_color=_require_str(data, "theme_color"),
        tag=tag,
        description=_optional_str(data, "description") or "",
        mode=_optional_str(data, "mode") or "development",
        scope=_optional_str(data, "scope") or "",
        short_name=_optional_str(data, "short_name"),
        background_color=_optional_str(data, "background_color"),
    )


def _parse_build_config(data: dict | None) -> BuildConfig:
    if data is None:
        return BuildConfig()

    if not isinstance(data, dict):
        raise ConfigError("'build' must be a dictionary")

    return BuildConfig(
        source_dir=str(data.get("source_dir", ".")),
        output_dir=str(data.get("output_dir", "dist")),
    )


def _apply_env_overrides(config_data: dict) -> dict:
    """Apply environment variable overrides to configuration.

    Supported overrides:
    - PWAFORGE_MODE: Override mode
    - PWAFORGE_SCOPE: Override scope
    - PWAFORGE_TAG: Override tag
    - PWAFORGE_SOURCE_DIR: Override build.source_dir
    - PWAFORGE_OUTPUT_DIR: Override build.output_dir
    """
    if config_data.get("build") is None:
        config_data["build"] = {}
    build = config_data["build"]

    for env_name, key in (
        ("PWAFORGE_MODE", "mode"),
        ("PWAFORGE_SCOPE", "scope"),
        ("PWAFORGE_TAG", "tag"),
    ):
        value = os.environ.get(env_name)
        if value is not None:
            config_data[key] = value

    source_dir = os.environ.get("PWAFORGE_SOURCE_DIR")
    if source_dir is not None and isinstance(build, dict):
        build["source_dir"] = source_dir

    output_dir = os.environ.get("PWAFORGE_OUTPUT_DIR")
    if output_dir is not None and isinstance(build, dict):
        build["output_dir"] = output_dir

    return config_data


def load_config(config_path: str) -> Config:
    """Load and validate configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If the file cannot be read or configuration is invalid.
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML configuration: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML dictionary")

    data = _apply_env_overrides(data)

    return Config(
        pwa=_parse_pwa_config(data),
        build=_parse_build_config(data.get("build")),
    )
