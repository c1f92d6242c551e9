#!/usr/bin/env python3
"""Logging configuration for the registry service"""
import os
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _bool(val: str) -> bool:
    return val.strip().lower() in ("1", "true", "yes")


@dataclass
class LoggingConfig:
    """Levels, format and handler targets for setup_service_logger"""
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    # Empty disables the file handler
    log_file: str = ""
    enable_console: bool = True

    service_name: str = "crowd_registry_service"
    environment: str = "development"

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """LOG_* variables; development defaults to DEBUG"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        default_level = "DEBUG" if env in ("development", "dev") else "INFO"
        return cls(
            log_level=os.getenv("LOG_LEVEL", default_level),
            log_format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("LOG_FILE", ""),
            enable_console=_bool(os.getenv("LOG_CONSOLE", "true")),
            service_name=os.getenv("SERVICE_NAME", "crowd_registry_service"),
            environment=env,
        )
