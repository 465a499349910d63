"""Lookup of tunable settings stored as JSON next to this module."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from ..config import get_config_dir

logger = logging.getLogger(__name__)


def load_config(config_name: str) -> Dict[str, Any]:
    """Read ``<config dir>/<config_name>.json``.
    
    Raises:
        FileNotFoundError: If there is no such settings file
        json.JSONDecodeError: If the file is not valid JSON
    """
    config_path = get_config_dir() / f"{config_name}.json"
    logger.debug("Loading settings from %s", config_path)
    with open(config_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def get_config_value(config_name: str, *keys: str, default: Any = None) -> Any:
    """Follow ``keys`` into a settings file, or return ``default``.
    
    A missing file, a missing key, or a non-mapping along the path all give
    ``default``; a malformed file still raises.
    
    Example:
        >>> get_config_value('tools', 'projection', 'recent_window_days', default=30)
        30
    """
    try:
        value: Any = load_config(config_name)
    except FileNotFoundError:
        return default
    for key in keys:
        if not isinstance(value, dict) or key not in value:
            return default
        value = value[key]
    return value
