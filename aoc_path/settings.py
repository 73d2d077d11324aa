"""
Settings Module - Search defaults read from a JSON file.

The file (aoc_path.json in the working directory) holds an object whose
keys mirror the SearchSettings fields:

    {"strategy_name": "dijkstra", "log_metrics": true}

Missing keys keep their defaults. Unknown keys and values of the wrong
type are logged and ignored, so a bad file never stops a search.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("aoc_path.json")


@dataclass(frozen=True)
class SearchSettings:
    """
    Attributes:
        strategy_name: Registered strategy used by create_default_strategy()
        log_metrics: Log search metrics at info level after each search
    """
    strategy_name: str = "astar"
    log_metrics: bool = False


_FIELD_TYPES = {f.name: f.type for f in fields(SearchSettings)}


def load_settings(path: Optional[Path] = None) -> SearchSettings:
    """
    Read settings, falling back to defaults for anything missing or invalid.

    Args:
        path: Settings file, SETTINGS_FILE if omitted

    Returns:
        SearchSettings with every valid key from the file applied
    """
    path = SETTINGS_FILE if path is None else path
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug(f"No settings file at {path}, using defaults")
        return SearchSettings()
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Unreadable settings file {path}: {e}")
        return SearchSettings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {path} must hold a JSON object, got {type(raw).__name__}")
        return SearchSettings()

    return SearchSettings(**_valid_values(raw, path))


def _valid_values(raw: Dict[str, Any], path: Path) -> Dict[str, Any]:
    values = {}
    for key, value in raw.items():
        expected = _FIELD_TYPES.get(key)
        if expected is None:
            logger.warning(f"Unknown setting '{key}' in {path}, ignoring")
        elif not isinstance(value, expected):
            logger.warning(
                f"Setting '{key}' in {path} must be {expected.__name__}, "
                f"got {value!r}; keeping default"
            )
        else:
            values[key] = value
    return values
