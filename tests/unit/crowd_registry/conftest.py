"""
Unit Test Fixtures for Crowd Registry Components

Each component gets in-memory storage and a publisher without an event bus,
so emitted events stay buffered in ``publisher.pending`` for inspection.
"""

import pytest

from microservices.crowd_registry_service.access_control import AccessControl
from microservices.crowd_registry_service.campaign_store import CampaignStore
from microservices.crowd_registry_service.events.publishers import CrowdRegistryEventPublisher
from microservices.crowd_registry_service.models import TokenMetadata
from microservices.crowd_registry_service.registry_repository import (
    InMemoryCampaignRepository,
    InMemoryLedgerRepository,
    InMemoryUserRepository,
)
from microservices.crowd_registry_service.token_ledger import TokenLedger
from microservices.crowd_registry_service.user_registry import UserRegistry


class FakeRuntime:
    """Runtime returning predictable ids and recording submissions"""

    def __init__(self, address: str):
        self.address = address
        self.submissions = []
        self.fail_with = None
        self.consumer = None

    def bind_consumer(self, callback):
        self.consumer = callback

    async def submit(self, encoded_request, subscription_id, gas_limit, domain_id):
        if self.fail_with:
            raise self.fail_with
        self.submissions.append((encoded_request, subscription_id, gas_limit, domain_id))
        return "0x" + f"{len(self.submissions):064x}"


@pytest.fixture
def publisher() -> CrowdRegistryEventPublisher:
    return CrowdRegistryEventPublisher()


@pytest.fixture
def ledger(publisher) -> TokenLedger:
    return TokenLedger(
        repository=InMemoryLedgerRepository(),
        metadata=TokenMetadata(name="CrowdToken", symbol="CRWD", decimals=18),
        publisher=publisher,
    )


@pytest.fixture
def user_registry(publisher) -> UserRegistry:
    return UserRegistry(repository=InMemoryUserRepository(), publisher=publisher)


@pytest.fixture
def campaign_store(publisher) -> CampaignStore:
    return CampaignStore(repository=InMemoryCampaignRepository(), publisher=publisher)


@pytest.fixture
def access_control(publisher, owner) -> AccessControl:
    return AccessControl(owner=owner, publisher=publisher)


@pytest.fixture
def fake_runtime(router) -> FakeRuntime:
    return FakeRuntime(router)


