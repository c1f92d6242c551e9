"""
Crowd Registry Event Data Models

Event type definitions and data structures for registry events consumed by
external indexers.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# Event Type Definitions
# =============================================================================


class CrowdRegistryEventType(str, Enum):
    """
    Events published by crowd_registry_service.

    These are the authoritative event types for this service.
    Indexers should reference these when subscribing.
    """
    # Registry events
    USER_REGISTERED = "registry.user.registered"
    CAMPAIGN_CREATED = "registry.campaign.created"
    CAMPAIGN_PERFORMANCE_UPDATED = "registry.campaign.performance_updated"
    REWARD_DISTRIBUTED = "registry.reward.distributed"

    # Token events
    TRANSFER = "registry.token.transfer"
    APPROVAL = "registry.token.approval"

    # Computation request events
    REQUEST_SENT = "registry.request.sent"
    REQUEST_FULFILLED = "registry.request.fulfilled"
    RESPONSE = "registry.request.response"

    # Ownership events
    OWNERSHIP_TRANSFER_REQUESTED = "registry.ownership.transfer_requested"
    OWNERSHIP_TRANSFERRED = "registry.ownership.transferred"


# =============================================================================
# Event Data Models - Published Events
# =============================================================================


class UserRegisteredEventData(BaseModel):
    """registry.user.registered event data"""
    identity: str = Field(..., description="Registered identity")
    name: str = Field(..., description="Display name")


class CampaignCreatedEventData(BaseModel):
    """registry.campaign.created event data"""
    id: int = Field(..., description="Campaign ID as stored")
    name: str
    description: str
    reward: int
    owner: str


class CampaignPerformanceUpdatedEventData(BaseModel):
    """registry.campaign.performance_updated event data"""
    id: int
    performance: int


class RewardDistributedEventData(BaseModel):
    """registry.reward.distributed event data"""
    sender: str
    target: str
    amount: int


class TransferEventData(BaseModel):
    """registry.token.transfer event data"""
    sender: str = Field(..., description="Debited identity (zero address on mint)")
    recipient: str
    value: int


class ApprovalEventData(BaseModel):
    """registry.token.approval event data"""
    owner: str
    spender: str
    value: int


class RequestSentEventData(BaseModel):
    """registry.request.sent event data"""
    request_id: str
    subscription_id: int
    domain_id: str


class RequestFulfilledEventData(BaseModel):
    """registry.request.fulfilled event data"""
    request_id: str


class ResponseEventData(BaseModel):
    """registry.request.response event data (payloads hex encoded)"""
    request_id: str
    response: str = Field(..., description="0x-prefixed hex")
    error: str = Field(..., description="0x-prefixed hex")


class OwnershipEventData(BaseModel):
    """registry.ownership.* event data"""
    previous_owner: str
    new_owner: str
    pending: Optional[bool] = None
