"""
Crowd Registry Service Factory

Factory functions for creating service instances with their dependencies.
This is the ONLY place that wires concrete repositories and the runtime.

Usage:
    from .factory import create_crowd_registry_service
    service = create_crowd_registry_service(config, event_bus)
    await service.initialize()
"""
from typing import Optional

from core.config import RegistryConfig, get_settings
from core.logger import setup_service_logger

from .access_control import AccessControl
from .campaign_store import CampaignStore
from .crowd_registry_service import CrowdRegistryService
from .events.publishers import CrowdRegistryEventPublisher
from .models import TokenMetadata
from .protocols import ComputationRuntimeProtocol
from .request_correlator import RequestCorrelator
from .token_ledger import TokenLedger
from .user_registry import UserRegistry


def create_crowd_registry_service(
    config: Optional[RegistryConfig] = None,
    event_bus=None,
    runtime: Optional[ComputationRuntimeProtocol] = None,
) -> CrowdRegistryService:
    """
    Create CrowdRegistryService with in-memory state.

    The returned service must be initialized (``await service.initialize()``)
    before use; initialization mints the fixed supply to the owner.

    Args:
        config: Registry configuration (defaults to the loaded settings)
        event_bus: Event bus for publishing events
        runtime: Computation runtime (defaults to the local router)

    Returns:
        Configured CrowdRegistryService instance
    """
    from .registry_repository import (
        InMemoryCampaignRepository,
        InMemoryLedgerRepository,
        InMemoryUserRepository,
    )

    config = config or get_settings()
    setup_service_logger(__package__, config=config.logging)

    if runtime is None:
        from .clients.computation_runtime import LocalComputationRuntime
        runtime = LocalComputationRuntime(
            address=config.runtime.router_address,
            max_gas_limit=config.runtime.gas_limit,
        )

    publisher = CrowdRegistryEventPublisher(event_bus=event_bus, source=config.service_name)
    access_control = AccessControl(owner=config.owner_address, publisher=publisher)

    ledger = TokenLedger(
        repository=InMemoryLedgerRepository(),
        metadata=TokenMetadata(
            name=config.token.name,
            symbol=config.token.symbol,
            decimals=config.token.decimals,
        ),
        publisher=publisher,
    )

    return CrowdRegistryService(
        ledger=ledger,
        users=UserRegistry(repository=InMemoryUserRepository(), publisher=publisher),
        campaigns=CampaignStore(repository=InMemoryCampaignRepository(), publisher=publisher),
        correlator=RequestCorrelator(runtime=runtime, access_control=access_control, publisher=publisher),
        access_control=access_control,
        publisher=publisher,
        initial_supply=config.token.initial_supply,
    )


__all__ = ["create_crowd_registry_service"]
