"""
pwquality Configuration Management
===================================

File-based configuration for the ``pwquality`` command-line tool using
Python dataclasses and TOML.

A configuration file has two tables::

    [global]
    log_level = "INFO"
    log_file = "pwquality.log"
    log_json = true
    output_format = "console"

    [quality]
    minLength = 12
    requireSymbol = false
    commonPasswords = ["letmein", "trustno1"]

``[quality]`` keys may also be written in TOML's snake_case style
(``min_length``); the loader rewrites those to the public option names.
The table is otherwise kept as a raw option mapping and handed to
:func:`pwquality.core.settings.resolve_settings`, so it follows the
same permissive, shallow overlay as options passed in code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pwquality.core.settings import OPTION_KEYS
from pwquality.exceptions import ConfigFileError


_DEFAULT_CONFIG_PATH: Path = Path("pwquality.toml")

# TOML-style attribute names -> public option names
_QUALITY_ALIASES: dict[str, str] = {attr: key for key, attr in OPTION_KEYS.items()}

_OUTPUT_FORMATS = ("console", "json")


@dataclass(slots=True)
class GlobalConfig:
    """Logging and output settings for the command-line tool."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_format: str = "console"


@dataclass(slots=True)
class AppConfig:
    """Top-level configuration: global settings plus evaluation options.

    Usage:
        >>> config = AppConfig.load("pwquality.toml")
        >>> config.quality.get("minLength")
        12
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    quality: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``pwquality.toml`` in
        the working directory and falls back to defaults when it is absent.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`AppConfig` instance.

        Raises:
            ConfigFileError: If an explicitly given file does not exist,
                cannot be parsed, its ``[quality]`` entry is not a table,
                or a ``[global]`` value has the wrong type.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise ConfigFileError(str(config_path), "file not found")
            return cls()

        try:
            with open(config_path, "rb") as fh:
                raw: dict[str, Any] = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigFileError(str(config_path), f"invalid TOML: {exc}") from exc
        except OSError as exc:
            raise ConfigFileError(str(config_path), exc.strerror or str(exc)) from exc

        quality = raw.get("quality", {})
        if not isinstance(quality, dict):
            raise ConfigFileError(str(config_path), "[quality] must be a table")

        global_settings = cls._build_section(GlobalConfig, raw.get("global", {}))
        problem = _check_global(global_settings)
        if problem:
            raise ConfigFileError(str(config_path), problem)

        return cls(
            global_settings=global_settings,
            quality={_QUALITY_ALIASES.get(k, k): v for k, v in quality.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: Any) -> Any:
        """Instantiate dataclass *cls* using only the keys it declares."""
        if not isinstance(data, dict):
            return cls()
        valid_keys = {f for f in cls.__dataclass_fields__}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def _check_global(section: GlobalConfig) -> Optional[str]:
    """Return a description of the first ill-typed ``[global]`` value."""
    if not isinstance(section.log_level, str):
        return "[global] log_level must be a string"
    if section.log_file is not None and not isinstance(section.log_file, str):
        return "[global] log_file must be a string"
    if not isinstance(section.log_json, bool):
        return "[global] log_json must be a boolean"
    if section.output_format not in _OUTPUT_FORMATS:
        return f"[global] output_format must be one of: {', '.join(_OUTPUT_FORMATS)}"
    return None
