"""Configuration model and file I/O.

The configuration holds the Open Build Service credentials and a few
tunables for the outdated check. It is stored as TOML in
~/.config/osutil/osutil.conf and loaded once per process.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from osutil.core.leap import LeapLine
from osutil.core.paths import get_config_path

DEFAULT_API_URL = "https://api.opensuse.org"
DEFAULT_REPOLOGY_URL = "https://repology.org/api/v1"
DEFAULT_CONCURRENCY = 4
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_STRIP_PREFIXES = ("python-",)


class OsutilConfig(BaseModel):
    """Validated osutil configuration.

    Attributes:
        username: Open Build Service user name.
        password: Open Build Service password.
        api_url: Base URL of the Open Build Service API.
        repology_url: Base URL of the Repology API.
        concurrency: Maximum number of packages checked at the same time.
        timeout_seconds: Timeout applied to every HTTP request.
        strip_prefixes: Package name prefixes removed before querying Repology.
        leap_lines: Extra or overriding Leap line table entries.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    username: Annotated[str, Field(min_length=1, description="OBS user name")]
    password: Annotated[SecretStr, Field(description="OBS password")]
    api_url: Annotated[str, Field(description="OBS API base URL")] = DEFAULT_API_URL
    repology_url: Annotated[
        str,
        Field(description="Repology API base URL"),
    ] = DEFAULT_REPOLOGY_URL
    concurrency: Annotated[
        int,
        Field(ge=1, le=32, description="Concurrent package checks (1-32)"),
    ] = DEFAULT_CONCURRENCY
    timeout_seconds: Annotated[
        float,
        Field(gt=0, le=600, description="Per-request timeout in seconds"),
    ] = DEFAULT_TIMEOUT_SECONDS
    strip_prefixes: Annotated[
        tuple[str, ...],
        Field(description="Prefixes stripped before Repology lookups"),
    ] = DEFAULT_STRIP_PREFIXES
    leap_lines: Annotated[
        dict[str, LeapLine],
        Field(default_factory=dict, description="Leap version to SLE line mapping overrides"),
    ]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the config file content is invalid."""


def load_config(path: Path | None = None) -> OsutilConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated OsutilConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    try:
        return OsutilConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: OsutilConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory and is only readable by the owner, since it holds a password.

    Args:
        config: The configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.chmod(tmp_path, 0o600)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config file: {e}") from e

    return config_path


def _config_to_dict(config: OsutilConfig) -> dict[str, object]:
    """Convert OsutilConfig to a dictionary for TOML serialization.

    Only values that differ from the defaults are written.
    """
    result: dict[str, object] = {
        "username": config.username,
        "password": config.password.get_secret_value(),
    }

    if config.api_url != DEFAULT_API_URL:
        result["api_url"] = config.api_url
    if config.repology_url != DEFAULT_REPOLOGY_URL:
        result["repology_url"] = config.repology_url
    if config.concurrency != DEFAULT_CONCURRENCY:
        result["concurrency"] = config.concurrency
    if config.timeout_seconds != DEFAULT_TIMEOUT_SECONDS:
        result["timeout_seconds"] = config.timeout_seconds
    if config.strip_prefixes != DEFAULT_STRIP_PREFIXES:
        result["strip_prefixes"] = list(config.strip_prefixes)
    if config.leap_lines:
        result["leap_lines"] = {
            version: {"latest": line.latest, "older": list(line.older)}
            for version, line in config.leap_lines.items()
        }

    return result
