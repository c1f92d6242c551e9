"""
Crowd Registry Events

Event models, publisher, and the in-process event bus.
"""

from .models import (
    CrowdRegistryEventType,
    UserRegisteredEventData,
    CampaignCreatedEventData,
    CampaignPerformanceUpdatedEventData,
    RewardDistributedEventData,
    TransferEventData,
    ApprovalEventData,
    RequestSentEventData,
    RequestFulfilledEventData,
    ResponseEventData,
    OwnershipEventData,
)
from .bus import InMemoryEventBus
from .publishers import CrowdRegistryEventPublisher

__all__ = [
    # Event Types
    "CrowdRegistryEventType",
    # Event Data Models
    "UserRegisteredEventData",
    "CampaignCreatedEventData",
    "CampaignPerformanceUpdatedEventData",
    "RewardDistributedEventData",
    "TransferEventData",
    "ApprovalEventData",
    "RequestSentEventData",
    "RequestFulfilledEventData",
    "ResponseEventData",
    "OwnershipEventData",
    # Bus and Publisher
    "InMemoryEventBus",
    "CrowdRegistryEventPublisher",
]
