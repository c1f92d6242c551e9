#!/usr/bin/env python3
"""
Core Module

Shared infrastructure for the crowd registry service.

COMPONENTS:
    - config/: dataclass configuration loaded from environment (.env aware)
    - logger.py: service logger setup

USAGE:
    from core.config import RegistryConfig
    from core.logger import setup_service_logger

    config = RegistryConfig.from_env()
    logger = setup_service_logger("crowd_registry_service")
"""

__version__ = "1.0.0"
