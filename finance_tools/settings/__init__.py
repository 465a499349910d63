"""Tunable defaults for the calculation tools, kept in JSON files."""

from .defaults import get_config_value, load_config

__all__ = ['get_config_value', 'load_config']
