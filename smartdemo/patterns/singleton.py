#!/usr/bin/env python3
"""
Singleton pattern: one application settings object per process.
"""

from typing import Optional


class AppSettings:
    """Process-wide settings. Obtain it through ``get_instance``."""

    _instance: Optional["AppSettings"] = None

    def __init__(self, app_name: str):
        self.app_name = app_name

    @classmethod
    def get_instance(cls, app_name: str = "PatternApp") -> "AppSettings":
        """Return the shared instance, creating it on first use.

        ``app_name`` only matters for the call that creates the instance.
        """
        if cls._instance is None:
            cls._instance = cls(app_name)
        return cls._instance
