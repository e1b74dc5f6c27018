"""Core modules - configurações principais"""
from football_stats.core.config import settings, Settings
from football_stats.core.database import get_db, Base, Database
from football_stats.core.logging_config import setup_logging

__all__ = [
    "settings",
    "Settings",
    "get_db",
    "Base",
    "Database",
    "setup_logging",
]
