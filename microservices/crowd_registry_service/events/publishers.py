"""
Crowd Registry Event Publishers

Events emitted while an operation runs are buffered. A rejected operation
discards its buffer, so observers never see events for state that was not
written. A committed operation moves its buffer to an outbox, which is
published in commit order once the service lock is released.
"""

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List

from pydantic import BaseModel

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

logger = logging.getLogger(__name__)


def to_hex(data: bytes) -> str:
    return "0x" + data.hex()


class CrowdRegistryEventPublisher:
    """Publisher for crowd registry events"""

    def __init__(self, event_bus=None, source: str = "crowd_registry_service"):
        self.event_bus = event_bus
        self.source = source
        self._pending: List[Dict[str, Any]] = []
        self._outbox: Deque[Dict[str, Any]] = deque()
        self._draining = False

    @property
    def pending(self) -> List[Dict[str, Any]]:
        """Events emitted by the current operation, not yet committed"""
        return list(self._pending)

    @property
    def outbox(self) -> List[Dict[str, Any]]:
        """Committed events waiting to be published"""
        return list(self._outbox)

    def emit(self, event_type: CrowdRegistryEventType, data: BaseModel) -> None:
        """Buffer an event for the running operation"""
        self._pending.append({
            "event_type": event_type.value,
            "source": self.source,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "data": data.model_dump(),
        })

    def discard(self) -> int:
        """Drop buffered events of a rejected operation"""
        dropped = len(self._pending)
        self._pending.clear()
        if dropped:
            logger.debug(f"Discarded {dropped} buffered event(s)")
        return dropped

    def commit(self) -> int:
        """Move the operation's buffered events to the outbox"""
        committed = len(self._pending)
        self._outbox.extend(self._pending)
        self._pending.clear()
        return committed

    async def drain(self) -> int:
        """
        Publish outbox events in commit order.

        Subscribers may call back into the service while this runs; the
        events their operations commit join the outbox and are published by
        the drain already in progress, after the current event. A nested
        call returns 0 immediately.

        Returns:
            Number of events accepted by the bus
        """
        if self._draining:
            return 0

        self._draining = True
        published = 0
        try:
            while self._outbox:
                event = self._outbox.popleft()
                if not self.event_bus:
                    logger.debug(f"Event bus not configured, skipping event: {event['event_type']}")
                    continue
                try:
                    await self.event_bus.publish_event(event)
                    published += 1
                    logger.debug(f"Published event: {event['event_type']}")
                except Exception as e:
                    logger.error(f"Failed to publish event {event['event_type']}: {e}")
        finally:
            self._draining = False
        return published

    async def flush(self) -> int:
        """Commit buffered events and publish them"""
        self.commit()
        return await self.drain()

    # ====================
    # Registry Events
    # ====================

    def emit_user_registered(self, identity: str, name: str) -> None:
        self.emit(
            CrowdRegistryEventType.USER_REGISTERED,
            UserRegisteredEventData(identity=identity, name=name),
        )

    def emit_campaign_created(
        self,
        campaign_id: int,
        name: str,
        description: str,
        reward: int,
        owner: str,
    ) -> None:
        self.emit(
            CrowdRegistryEventType.CAMPAIGN_CREATED,
            CampaignCreatedEventData(
                id=campaign_id,
                name=name,
                description=description,
                reward=reward,
                owner=owner,
            ),
        )

    def emit_campaign_performance_updated(self, campaign_id: int, performance: int) -> None:
        self.emit(
            CrowdRegistryEventType.CAMPAIGN_PERFORMANCE_UPDATED,
            CampaignPerformanceUpdatedEventData(id=campaign_id, performance=performance),
        )

    def emit_reward_distributed(self, sender: str, target: str, amount: int) -> None:
        self.emit(
            CrowdRegistryEventType.REWARD_DISTRIBUTED,
            RewardDistributedEventData(sender=sender, target=target, amount=amount),
        )

    # ====================
    # Token Events
    # ====================

    def emit_transfer(self, sender: str, recipient: str, value: int) -> None:
        self.emit(
            CrowdRegistryEventType.TRANSFER,
            TransferEventData(sender=sender, recipient=recipient, value=value),
        )

    def emit_approval(self, owner: str, spender: str, value: int) -> None:
        self.emit(
            CrowdRegistryEventType.APPROVAL,
            ApprovalEventData(owner=owner, spender=spender, value=value),
        )

    # ====================
    # Request Events
    # ====================

    def emit_request_sent(self, request_id: str, subscription_id: int, domain_id: str) -> None:
        self.emit(
            CrowdRegistryEventType.REQUEST_SENT,
            RequestSentEventData(
                request_id=request_id,
                subscription_id=subscription_id,
                domain_id=domain_id,
            ),
        )

    def emit_response(self, request_id: str, response: bytes, error: bytes) -> None:
        self.emit(
            CrowdRegistryEventType.RESPONSE,
            ResponseEventData(request_id=request_id, response=to_hex(response), error=to_hex(error)),
        )
        self.emit(
            CrowdRegistryEventType.REQUEST_FULFILLED,
            RequestFulfilledEventData(request_id=request_id),
        )

    # ====================
    # Ownership Events
    # ====================

    def emit_ownership_transfer_requested(self, previous_owner: str, new_owner: str) -> None:
        self.emit(
            CrowdRegistryEventType.OWNERSHIP_TRANSFER_REQUESTED,
            OwnershipEventData(previous_owner=previous_owner, new_owner=new_owner, pending=True),
        )

    def emit_ownership_transferred(self, previous_owner: str, new_owner: str) -> None:
        self.emit(
            CrowdRegistryEventType.OWNERSHIP_TRANSFERRED,
            OwnershipEventData(previous_owner=previous_owner, new_owner=new_owner, pending=False),
        )


__all__ = ["CrowdRegistryEventPublisher", "to_hex"]
