"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class PassbookConfig(BaseSettings):
    """Passbook ledger configuration"""

    model_config = SettingsConfigDict(
        env_prefix="PASSBOOK_",
        env_file=".env",
        case_sensitive=False,
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Ledger descriptions for system-generated entries
    interest_description: str = "Monthly interest"
    closure_description: str = "Account closed"
    rollback_description: str = "Rollback failed transfer"


# Global configuration instance
config = PassbookConfig()


def get_config() -> PassbookConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> PassbookConfig:
    """Reload configuration from environment"""
    global config
    config = PassbookConfig()
    return config
