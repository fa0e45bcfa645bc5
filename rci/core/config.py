"""Typed configuration loading.

The optional ``rci.toml`` file carries per-repository defaults so that
workflow files do not have to repeat them on every invocation:

    [image]
    suffix = "-distroless"
    registry = "ghcr.io"

    [build]
    host = "x86_64-unknown-linux-gnu"
    force_cross = false
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_raw_str, get_str, get_table

__all__ = [
    "Config",
    "ImageConfig",
    "BuildConfig",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "find_config_path",
    "CONFIG_FILE_NAME",
    "CONFIG_ENV_VAR",
]

CONFIG_FILE_NAME = "rci.toml"
CONFIG_ENV_VAR = "RCI_CONFIG"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ImageConfig:
    """Container image naming.

    ``suffix`` is appended verbatim to the repository name (it may legitimately
    start with a dash, so it is not stripped). ``registry`` is the host prefix
    used when forming a full image reference.
    """

    suffix: str = ""
    registry: str | None = None


@dataclass(frozen=True, slots=True)
class BuildConfig:
    host: str | None = None
    force_cross: bool = False


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    image: ImageConfig = field(default_factory=ImageConfig)
    build: BuildConfig = field(default_factory=BuildConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        image: StrDict = get_table(data, "image") or {}
        build: StrDict = get_table(data, "build") or {}

        return cls(
            image=ImageConfig(
                suffix=get_raw_str(image, "suffix") or "",
                registry=get_str(image, "registry"),
            ),
            build=BuildConfig(
                host=get_str(build, "host"),
                force_cross=get_bool(build, "force_cross") or False,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to rci.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any failure."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()


def find_config_path(
    explicit: Path | None,
    *,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> tuple[Path | None, bool]:
    """Locate the config file.

    Returns (path, required). ``required`` is True when the path was asked for
    explicitly (option or env var), in which case a load failure is an error.
    """
    if explicit is not None:
        return explicit, True

    environ = os.environ if env is None else env
    from_env = environ.get(CONFIG_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env), True

    candidate = (cwd or Path.cwd()) / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate, False
    return None, False
