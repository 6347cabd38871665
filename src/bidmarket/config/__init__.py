"""Configuration module for the bidmarket application.

This module provides centralized configuration management for the entire application,
including database connections, logging setup, error handling, and application settings.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Database: SQLAlchemy engine and session management for SQLite
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and exception definitions
- Database seeding: Sample categories, auctions and bids (bidmarket.config.seed)

The configuration supports multiple environments (development, testing, production)
and allows runtime configuration through environment variables while maintaining
sensible defaults from the app.toml configuration file.
"""

from bidmarket.config.config import settings
from bidmarket.config.db import engine, get_session
from bidmarket.config.errors import ErrorCode, ErrorNames
from bidmarket.config.logger import config_logger

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "config_logger",
    "engine",
    "get_session",
    "settings",
]
