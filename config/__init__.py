"""
Configuration package for the mock lifecycle demo.

Modules:
    settings: Centralized configuration using Pydantic Settings
"""

from config.settings import Settings, settings

__all__ = ["Settings", "settings"]
