"""Configuration module for expertchat."""

from .settings import ApiSettings, LoggingSettings, Settings, get_settings

__all__ = ["ApiSettings", "LoggingSettings", "Settings", "get_settings"]
