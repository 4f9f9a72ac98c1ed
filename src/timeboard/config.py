"""Load, save, and validate the JSON config at ~/.config/timeboard/config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "timeboard"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULTS: dict[str, dict[str, Any]] = {
    "tick_interval": {
        "value": 0.25,
        "description": "Seconds between display refreshes. Keep at or below 0.25 so seconds stay in step.",
    },
    "time_size": {
        "value": "16vw",
        "description": "Starting size of the time display (magnitude + unit). Double-click the handle to return to it.",
    },
    "time_size_min": {
        "value": 8,
        "description": "Smallest size the time display can be dragged to.",
    },
    "time_size_max": {
        "value": 25,
        "description": "Largest size the time display can be dragged to.",
    },
    "note_size_min": {
        "value": 3,
        "description": "Smallest note size on the slider.",
    },
    "note_size_max": {
        "value": 9,
        "description": "Largest note size on the slider.",
    },
    "note_initial_progress": {
        "value": 0.2,
        "description": "Where a new note's size slider starts, 0.0 (smallest) to 1.0 (largest).",
    },
    "min_font_px": {
        "value": 10,
        "description": "A drag never shrinks rendered text below this many pixels.",
    },
    "cell_px": {
        "value": 16,
        "description": "Pixel height assumed for one terminal row when applying min_font_px.",
    },
    "countdown_by_end_time": {
        "value": True,
        "description": "Countdown setup starts on 'end time' (true) or 'duration' (false).",
    },
}


def _ensure_dir() -> None:
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)


def load_config() -> dict[str, Any]:
    """Return a flat dict of {key: value} from the config file, merged with defaults."""
    values: dict[str, Any] = {k: v["value"] for k, v in DEFAULTS.items()}

    if CONFIG_PATH.exists():
        try:
            raw = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
            for key, entry in raw.items():
                if key.startswith("_"):
                    continue
                if isinstance(entry, dict) and "value" in entry:
                    values[key] = entry["value"]
                else:
                    values[key] = entry
        except (json.JSONDecodeError, OSError, AttributeError) as exc:
            logger.warning("Could not read config at %s: %s", CONFIG_PATH, exc)

    return values


def save_config(values: dict[str, Any]) -> None:
    """Write current values back to the config file, preserving descriptions."""
    _ensure_dir()
    data: dict[str, Any] = {
        "_description": "timeboard configuration. Edit values below; descriptions are for reference."
    }
    for key, meta in DEFAULTS.items():
        data[key] = {
            "value": values.get(key, meta["value"]),
            "description": meta["description"],
        }
    CONFIG_PATH.write_text(
        json.dumps(data, indent=4, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.info("Config saved to %s", CONFIG_PATH)


def get(key: str) -> Any:
    """Convenience: load config and return one value."""
    return load_config()[key]


def init_config_if_missing() -> bool:
    """Create default config file if it doesn't exist. Return True if created."""
    if CONFIG_PATH.exists():
        return False
    defaults = {k: v["value"] for k, v in DEFAULTS.items()}
    save_config(defaults)
    return True
