#!/usr/bin/env python3
"""Crowd registry configuration

Token parameters, the deploying owner identity, and the routing/billing
parameters handed through to the computation runtime.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig

ZERO_ADDRESS = "0x" + "0" * 40


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class TokenConfig:
    """Fungible token parameters, fixed at construction"""
    name: str = "CrowdToken"
    symbol: str = "CRWD"
    decimals: int = 18
    initial_supply: int = 1_000_000 * 10 ** 18

    @classmethod
    def from_env(cls) -> 'TokenConfig':
        decimals = _int(os.getenv("TOKEN_DECIMALS", "18"), 18)
        return cls(
            name=os.getenv("TOKEN_NAME", "CrowdToken"),
            symbol=os.getenv("TOKEN_SYMBOL", "CRWD"),
            decimals=decimals,
            # TOKEN_INITIAL_SUPPLY is given in whole tokens
            initial_supply=_int(os.getenv("TOKEN_INITIAL_SUPPLY", "1000000"), 1_000_000) * 10 ** decimals,
        )


@dataclass
class RuntimeConfig:
    """Computation runtime routing parameters (passed through, uninterpreted)"""
    router_address: str = "0x" + "f" * 40
    subscription_id: int = 0
    gas_limit: int = 300_000
    domain_id: str = "fun-local-1"

    @classmethod
    def from_env(cls) -> 'RuntimeConfig':
        return cls(
            router_address=os.getenv("FUNCTIONS_ROUTER_ADDRESS", "0x" + "f" * 40),
            subscription_id=_int(os.getenv("FUNCTIONS_SUBSCRIPTION_ID", "0"), 0),
            gas_limit=_int(os.getenv("FUNCTIONS_GAS_LIMIT", "300000"), 300_000),
            domain_id=os.getenv("FUNCTIONS_DON_ID", "fun-local-1"),
        )


@dataclass
class RegistryConfig:
    """Main crowd registry configuration with all sub-configs"""
    service_name: str = "crowd_registry_service"
    environment: str = "development"

    # Deployer; becomes the single owner and receives the initial supply
    owner_address: str = "0x" + "1" * 40

    token: TokenConfig = field(default_factory=TokenConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'RegistryConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            service_name=os.getenv("SERVICE_NAME", "crowd_registry_service"),
            environment=env,
            owner_address=os.getenv("REGISTRY_OWNER_ADDRESS", "0x" + "1" * 40),
            token=TokenConfig.from_env(),
            runtime=RuntimeConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )
