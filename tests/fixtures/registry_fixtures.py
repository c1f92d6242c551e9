"""
Crowd Registry Fixtures

Factories for registry configuration and request parts.
"""
from typing import Optional

from core.config import LoggingConfig, RegistryConfig, RuntimeConfig, TokenConfig

OWNER = "0x" + "1" * 40
ROUTER = "0x" + "f" * 40
SUPPLY = 1_000_000


def make_registry_config(
    owner: str = OWNER,
    router: str = ROUTER,
    initial_supply: int = SUPPLY,
    gas_limit: int = 300_000,
    log_file: Optional[str] = None,
) -> RegistryConfig:
    """Registry config independent of the process environment"""
    return RegistryConfig(
        service_name="crowd_registry_service",
        environment="testing",
        owner_address=owner,
        token=TokenConfig(name="CrowdToken", symbol="CRWD", decimals=18, initial_supply=initial_supply),
        runtime=RuntimeConfig(router_address=router, subscription_id=1, gas_limit=gas_limit, domain_id="fun-test-1"),
        logging=LoggingConfig(log_level="DEBUG", log_file=log_file or "", enable_console=False, environment="testing"),
    )


def make_source_code(result: str = "ok") -> str:
    """Inline JavaScript returning a fixed string"""
    return f"return Functions.encodeString('{result}');"


def event_types(publisher) -> list:
    """Event types buffered by a publisher, in emission order"""
    return [e["event_type"] for e in publisher.pending]
