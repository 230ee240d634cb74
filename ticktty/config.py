"""Saved display preferences."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .layout import DisplayStyle

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "TICKTTY_CONFIG_DIR"
CONFIG_FILENAME = "default.json"

STYLES = tuple(style.value for style in DisplayStyle)


@dataclass
class Config:
    style: str = "digital"
    font_index: int = 0
    use_glyphs: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a config from loaded JSON, keeping defaults for bad values."""
        config = cls()
        style = data.get("style")
        if style in STYLES:
            config.style = style
        elif style is not None:
            logger.warning("Ignoring unknown style %r in config", style)

        font_index = data.get("font_index")
        if isinstance(font_index, int) and not isinstance(font_index, bool) and font_index >= 0:
            config.font_index = font_index
        elif font_index is not None:
            logger.warning("Ignoring invalid font_index %r in config", font_index)

        use_glyphs = data.get("use_glyphs")
        if isinstance(use_glyphs, bool):
            config.use_glyphs = use_glyphs
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".config" / "ticktty"


def config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> Config:
    """Load preferences, falling back to defaults on any problem."""
    path = path or config_path()
    if not path.exists():
        return Config()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read config %s: %s", path, exc)
        return Config()
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object", path)
        return Config()
    return Config.from_dict(data)


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """Write preferences to disk. Errors are logged, not raised."""
    path = path or config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save config %s: %s", path, exc)
        return
    logger.debug("Saved config to %s", path)
