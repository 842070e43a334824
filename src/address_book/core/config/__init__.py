# Configuration package

from address_book.core.config.app_config import AppConfig, LogLevel, load_config

__all__ = ["AppConfig", "LogLevel", "load_config"]
