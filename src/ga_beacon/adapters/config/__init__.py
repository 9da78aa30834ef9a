"""Configuration adapters."""

from ga_beacon.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
