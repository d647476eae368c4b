"""Configuration management for Journi."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

JOURNI_HOME = Path(os.environ.get("JOURNI_HOME", Path.home() / "journi"))
CONFIG_FILE = JOURNI_HOME / "config" / "journi.conf"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Journi configuration."""

    journal_dir: str = ""
    file_extension: str = "txt"
    use_editor: bool = True


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]

    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from journi.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "journal_dir":
                config.journal_dir = value
            case "file_extension":
                config.file_extension = value.lstrip(".") or config.file_extension
            case "use_editor":
                config.use_editor = _parse_bool(key, value, config.use_editor)
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
