"""Configuration loading from environment variables and postprose.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_POSTS_DIR = Path("posts")
_CONFIG_FILENAME = "postprose.toml"


@dataclass
class PostproseConfig:
    """Top-level postprose configuration."""

    posts_dir: Path = _DEFAULT_POSTS_DIR
    extension: str = "md"
    recursive: bool = False
    strict: bool = True
    log_level: str = "INFO"


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Path | None = None) -> PostproseConfig:
    """Load configuration from environment variables and optional postprose.toml.

    Priority: environment variables > postprose.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.postprose/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".postprose" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    posts_data = file_data.get("posts", {})

    return PostproseConfig(
        posts_dir=Path(
            os.getenv("POSTPROSE_POSTS_DIR", posts_data.get("dir", str(_DEFAULT_POSTS_DIR)))
        ),
        extension=os.getenv("POSTPROSE_EXTENSION", posts_data.get("extension", "md")),
        recursive=_as_bool(os.getenv("POSTPROSE_RECURSIVE", posts_data.get("recursive", False))),
        strict=_as_bool(os.getenv("POSTPROSE_STRICT", posts_data.get("strict", True))),
        log_level=os.getenv("POSTPROSE_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
