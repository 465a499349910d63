"""Configuration management for the finance tools.

This module centralizes paths and environment variable overrides, and
offers a small helper for turning on log output.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

# Base package directory - assumes this file is in finance_tools/
_PACKAGE_ROOT = Path(__file__).parent.resolve()

# Directory holding the JSON settings files
CONFIG_DIR = Path(
    os.getenv("FINTOOLS_CONFIG_DIR", _PACKAGE_ROOT / "settings")
).resolve()

# Log level used by configure_logging when none is given
LOG_LEVEL = os.getenv("FINTOOLS_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_config_dir() -> Path:
    """Get the settings directory, honouring a late ``FINTOOLS_CONFIG_DIR``."""
    override = os.getenv("FINTOOLS_CONFIG_DIR")
    return Path(override).resolve() if override else CONFIG_DIR


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Send ``finance_tools`` log records to stderr.

    Args:
        level: Level name or number; defaults to ``FINTOOLS_LOG_LEVEL``.
    """
    resolved = level if level is not None else os.getenv("FINTOOLS_LOG_LEVEL", LOG_LEVEL)
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("finance_tools").setLevel(resolved)
