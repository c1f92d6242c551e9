#!/usr/bin/env python3
"""
Service logger setup

Configures the standard library logger for a service from LoggingConfig.
Module code keeps using ``logging.getLogger(__name__)``; this only attaches
handlers and levels once per service.
"""
import logging
import sys
from typing import Optional

from core.config import LoggingConfig

_configured = set()


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Create (or return) the named service logger.

    Args:
        service_name: Logger name, usually the service package name
        level: Override for the configured log level
        config: Logging configuration (defaults to environment)

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    if service_name in _configured:
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _configured.add(service_name)
    return logger


__all__ = ["setup_service_logger"]
