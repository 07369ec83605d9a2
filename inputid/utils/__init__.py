"""Utility helpers for inputid."""

from .config import Config, find_config_file, load_config
from .logger import setup_logger

__all__ = ["Config", "find_config_file", "load_config", "setup_logger"]
