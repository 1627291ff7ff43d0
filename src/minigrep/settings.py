from __future__ import annotations

"""Settings file handling for minigrep.

The settings only tune the tool around the search (logging, input
encoding). They never change which lines match.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping
import codecs
import os
import textwrap
import tomllib

from .errors import SettingsError
from .logging_setup import LOG_LEVELS

__all__ = [
    "Settings",
    "load_settings",
    "write_default_settings",
    "default_settings_path",
    "DEFAULT_SETTINGS_TOML",
    "SETTINGS_ENV",
]

SETTINGS_ENV = "MINIGREP_CONFIG"

DEFAULT_SETTINGS_TOML = textwrap.dedent(
    """
    [logging]
    level = "WARNING"
    file = ""

    [input]
    encoding = ""
    """
)


@dataclass(frozen=True, slots=True)
class Settings:
    """Ambient runtime settings. ``None`` means "not configured"."""

    log_level: str = "WARNING"
    log_file: str | None = None
    encoding: str | None = None


def default_settings_path() -> Path:
    return Path.home() / ".config" / "minigrep" / "config.toml"


def load_settings(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from the first available source.

    Resolution order:
        1. explicit ``config_path`` argument (must exist)
        2. ``MINIGREP_CONFIG`` environment variable
        3. ``~/.config/minigrep/config.toml``
        4. packaged default settings
    """

    if config_path:
        explicit = Path(config_path).expanduser()
        if not explicit.is_file():
            raise SettingsError(f"settings file not found: {explicit}")
        return _settings_from_path(explicit)

    env = os.environ if environ is None else environ
    candidates: list[Path] = []
    env_path = env.get(SETTINGS_ENV)
    if env_path:
        candidates.append(Path(env_path).expanduser())
    candidates.append(default_settings_path())

    for candidate in candidates:
        if candidate.is_file():
            return _settings_from_path(candidate)

    return _settings_from_toml(DEFAULT_SETTINGS_TOML, "<defaults>")


def _settings_from_path(path: Path) -> Settings:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise SettingsError(f"cannot read settings file {path}: {error}") from error
    return _settings_from_toml(raw, str(path))


def _settings_from_toml(content: str, source: str) -> Settings:
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as error:
        raise SettingsError(f"invalid TOML in {source}: {error}") from error

    logging_section = _section(data, "logging", source)
    input_section = _section(data, "input", source)

    level = (_optional_str(logging_section, "level", source) or "WARNING").upper()
    if level not in LOG_LEVELS:
        raise SettingsError(f"unknown log level {level!r} in {source}")
    encoding = _optional_str(input_section, "encoding", source)
    if encoding is not None:
        _check_encoding(encoding, source)
    return Settings(
        log_level=level,
        log_file=_optional_str(logging_section, "file", source),
        encoding=encoding,
    )


def _section(data: Mapping[str, Any], name: str, source: str) -> Mapping[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise SettingsError(f"[{name}] must be a table in {source}")
    return section


def _optional_str(section: Mapping[str, Any], key: str, source: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SettingsError(f"{key} must be a string in {source}, got {type(value).__name__}")
    return value.strip() or None


def write_default_settings(target_path: str | Path) -> Path:
    """Write the default settings to ``target_path``.

    Creates parent directories if needed and returns the absolute path
    to the created file.
    """

    target = Path(target_path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_SETTINGS_TOML, encoding="utf-8")
    return target.resolve()


def _check_encoding(name: str, source: str) -> None:
    try:
        info = codecs.lookup(name)
    except LookupError as error:
        raise SettingsError(f"unknown encoding {name!r} in {source}") from error
    # base64 / rot13 之类的编解码器无法用于 open()
    if not getattr(info, "_is_text_encoding", True):
        raise SettingsError(f"{name!r} is not a text encoding in {source}")
