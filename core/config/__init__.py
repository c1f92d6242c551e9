#!/usr/bin/env python3
"""Modular configuration system for the crowd registry

Configuration hierarchy:
- registry_config: token parameters, owner identity, runtime routing
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .registry_config import (
    ZERO_ADDRESS,
    RegistryConfig,
    RuntimeConfig,
    TokenConfig,
)

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = RegistryConfig.from_env()

def get_settings() -> RegistryConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> RegistryConfig:
    """Reload settings from environment"""
    global settings
    settings = RegistryConfig.from_env()
    return settings

__all__ = [
    # Main config
    'RegistryConfig',
    'get_settings',
    'reload_settings',
    'settings',
    # Sub-configs
    'LoggingConfig',
    'TokenConfig',
    'RuntimeConfig',
    'ZERO_ADDRESS',
]
