"""User settings stored as TOML in the click app directory."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from cnabparse.errors import InvalidEncoding
from cnabparse.parser import check_encoding

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

FORMATS = ("text", "json", "csv")


@dataclass
class Config:
    encoding: str = "utf-8"
    strip: bool = False
    format: str = "text"


def get_config_path() -> Path:
    """Return the TOML config file path via click.get_app_dir."""
    return Path(click.get_app_dir("cnabparse")) / "config.toml"


def load_config(path: Optional[Path] = None) -> Config:
    """Read TOML config. Returns defaults if the file is missing.

    Raises click.UsageError if the file exists but is not usable.
    """
    path = path or get_config_path()
    if not path.exists():
        return Config()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise click.UsageError(f"Invalid config file {path}: {e}")

    config = Config()
    if "encoding" in data:
        config.encoding = str(data["encoding"])
    if "strip" in data:
        if not isinstance(data["strip"], bool):
            raise click.UsageError(f"Config {path}: 'strip' must be true or false")
        config.strip = data["strip"]
    if "format" in data:
        config.format = str(data["format"])

    validate_config(config, path)
    return config


def validate_config(config: Config, path: Optional[Path] = None) -> None:
    where = f"Config {path}: " if path else ""
    try:
        check_encoding(config.encoding)
    except InvalidEncoding:
        raise click.UsageError(f"{where}unknown encoding '{config.encoding}'")
    if config.format not in FORMATS:
        raise click.UsageError(
            f"{where}format must be one of {', '.join(FORMATS)}, got '{config.format}'"
        )


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    """Write config as TOML."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        f"encoding = \"{config.encoding}\"",
        f"strip = {'true' if config.strip else 'false'}",
        f"format = \"{config.format}\"",
        "",
    ]
    path.write_text("\n".join(lines), encoding="utf-8")
    return path
