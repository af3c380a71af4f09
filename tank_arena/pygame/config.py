"""User configuration for the pygame client."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"


def load_user_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load optional user settings (cell size, key bindings) from disk."""
    target = path or _SETTINGS_PATH
    try:
        with target.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
            if isinstance(data, dict):
                return data
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring malformed settings file %s: %s", target, exc)
        return {}
    except OSError as exc:
        logger.warning("Could not read settings file %s: %s", target, exc)
        return {}
    return {}


__all__ = ["load_user_settings"]
