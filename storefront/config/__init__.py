"""
Storefront Dashboard
Configuration Module
"""
from .settings import LoggingSettings, PayloadSettings, Settings, get_settings

__all__ = ["LoggingSettings", "PayloadSettings", "Settings", "get_settings"]
