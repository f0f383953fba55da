"""Configuration discovery and parsing helpers."""

from debugfmt.lib.config.settings import DebugfmtConfig, load_config

__all__ = ["DebugfmtConfig", "load_config"]
