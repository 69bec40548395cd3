"""Configuration management for daylog."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DAYLOG_HOME = Path(os.environ.get("DAYLOG_HOME", Path.home() / "daylog"))
CONFIG_FILE = DAYLOG_HOME / "config" / "daylog.conf"


@dataclass
class Config:
    """daylog configuration."""

    notes_dir: str = ""
    include_glob: str = "**/*.md"
    exclude_dirs: list[str] = field(default_factory=lambda: ["node_modules"])


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]

    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daylog.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for lineno, line in enumerate(path.read_text().splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.warning(f"Ignoring malformed line {lineno} in {path}: {line!r}")
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "notes_dir":
                config.notes_dir = value
            case "include_glob":
                if value:
                    config.include_glob = value
                else:
                    logger.warning("Empty INCLUDE_GLOB, keeping default")
            case "exclude_dirs":
                config.exclude_dirs = [d.strip() for d in value.split(",") if d.strip()]
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
