"""
Crowd Registry Service Business Logic

Coordinates the token ledger, user registry, campaign store, request
correlator and access control. Every public operation runs under one lock
and is all-or-nothing: preconditions are checked before the first write,
and the events an operation emits are published only after it succeeds.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import List, Optional, Sequence

from .access_control import AccessControl
from .campaign_store import CampaignStore
from .events.publishers import CrowdRegistryEventPublisher
from .models import (
    Campaign,
    LedgerSnapshot,
    PendingRequest,
    RequestReceipt,
    RewardReceipt,
    TokenMetadata,
    User,
)
from .protocols import CrowdRegistryError, InvalidArgumentError, require_amount
from .request_correlator import RequestCorrelator
from .token_ledger import TokenLedger
from .user_registry import UserRegistry

logger = logging.getLogger(__name__)


class CrowdRegistryService:
    """Crowd registry service business logic layer"""

    def __init__(
        self,
        ledger: TokenLedger,
        users: UserRegistry,
        campaigns: CampaignStore,
        correlator: RequestCorrelator,
        access_control: AccessControl,
        publisher: CrowdRegistryEventPublisher,
        initial_supply: int = 0,
    ):
        self.ledger = ledger
        self.users = users
        self.campaigns = campaigns
        self.correlator = correlator
        self.access_control = access_control
        self.publisher = publisher
        self.initial_supply = initial_supply
        self._lock = asyncio.Lock()
        self._initialized = False

        # Runtime deliveries enter through the same serialized path
        self.correlator.runtime.bind_consumer(self.on_response)

    async def initialize(self) -> None:
        """Mint the fixed supply to the owner; runs once"""
        async with self._operation("initialize"):
            if self._initialized:
                raise InvalidArgumentError("Service already initialized")
            await self.ledger.mint_initial(self.access_control.owner, self.initial_supply)
            self._initialized = True
        logger.info(
            f"Crowd registry initialized: owner={self.access_control.owner}, "
            f"supply={self.initial_supply} {self.ledger.symbol}"
        )

    @asynccontextmanager
    async def _operation(self, name: str):
        """Serialize one operation and commit or drop its events"""
        async with self._lock:
            try:
                yield
            except CrowdRegistryError as e:
                self.publisher.discard()
                logger.warning(f"{name} rejected: {type(e).__name__}: {e}")
                raise
            except Exception:
                self.publisher.discard()
                logger.exception(f"{name} failed")
                raise
            self.publisher.commit()
        # Published outside the lock; subscribers may call back into the service
        await self.publisher.drain()

    # ====================
    # Users
    # ====================

    async def register_user(self, identity: str, name: str) -> User:
        async with self._operation("register_user"):
            return await self.users.register(identity, name)

    async def get_user(self, identity: str) -> User:
        return await self.users.get_user(identity)

    async def list_users(self) -> List[User]:
        return await self.users.list_users()

    # ====================
    # Campaigns
    # ====================

    async def create_campaign(self, name: str, description: str, reward: int, caller: str) -> Campaign:
        async with self._operation("create_campaign"):
            return await self.campaigns.create(name, description, reward, caller)

    async def update_campaign_performance(self, campaign_id: int, performance: int, caller: str) -> Campaign:
        async with self._operation("update_campaign_performance"):
            return await self.campaigns.update_performance(campaign_id, performance, caller)

    async def get_campaign(self, campaign_id: int) -> Campaign:
        return await self.campaigns.get(campaign_id)

    async def list_campaigns(self, owner: Optional[str] = None) -> List[Campaign]:
        return await self.campaigns.list_campaigns(owner=owner)

    async def campaign_count(self) -> int:
        return await self.campaigns.campaign_count()

    # ====================
    # Rewards
    # ====================

    async def reward(self, caller: str, target: str, amount: int) -> RewardReceipt:
        """
        Pay amount of the caller's tokens to a registered user.

        The ledger transfer and the target's reward mirror move together;
        an unregistered target or a short balance rejects both.
        """
        async with self._operation("reward"):
            require_amount(amount, "reward amount")
            if amount <= 0:
                raise InvalidArgumentError(f"Reward amount must be positive: {amount}")
            # Existence check first; a failed transfer below leaves nothing to undo
            await self.users.get_user(target)

            await self.ledger.transfer(caller, target, amount)
            user = await self.users.credit_reward(target, amount)
            self.publisher.emit_reward_distributed(caller, target, amount)

            receipt = RewardReceipt(
                sender=caller,
                target=target,
                amount=amount,
                sender_balance=await self.ledger.balance_of(caller),
                target_ledger_balance=await self.ledger.balance_of(target),
                target_reward_balance=user.balance,
            )
        logger.info(f"Reward distributed: {caller} -> {target} ({amount})")
        return receipt

    # ====================
    # Token Ledger
    # ====================

    async def transfer(self, caller: str, recipient: str, amount: int) -> None:
        async with self._operation("transfer"):
            await self.ledger.transfer(caller, recipient, amount)

    async def approve(self, caller: str, spender: str, amount: int) -> None:
        async with self._operation("approve"):
            await self.ledger.approve(caller, spender, amount)

    async def transfer_from(self, caller: str, sender: str, recipient: str, amount: int) -> None:
        async with self._operation("transfer_from"):
            await self.ledger.transfer_from(caller, sender, recipient, amount)

    async def balance_of(self, identity: str) -> int:
        return await self.ledger.balance_of(identity)

    async def allowance(self, owner: str, spender: str) -> int:
        return await self.ledger.allowance(owner, spender)

    async def total_supply(self) -> int:
        return await self.ledger.total_supply()

    def token_metadata(self) -> TokenMetadata:
        return self.ledger.metadata

    async def ledger_snapshot(self) -> LedgerSnapshot:
        return await self.ledger.snapshot()

    # ====================
    # Computation Requests
    # ====================

    async def send_request(
        self,
        source_code: str,
        caller: str,
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
        secrets_ref: Optional[bytes] = None,
        secrets_slot: int = 0,
        secrets_version: int = 0,
        args: Optional[Sequence[str]] = None,
        bytes_args: Optional[Sequence[bytes]] = None,
    ) -> RequestReceipt:
        async with self._operation("send_request"):
            return await self.correlator.issue_request(
                source_code,
                secrets_ref,
                secrets_slot,
                secrets_version,
                args,
                bytes_args,
                subscription_id,
                gas_limit,
                domain_id,
                caller,
            )

    async def send_raw_request(
        self,
        payload: bytes,
        caller: str,
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
    ) -> RequestReceipt:
        async with self._operation("send_raw_request"):
            return await self.correlator.issue_raw_request(
                payload, subscription_id, gas_limit, domain_id, caller
            )

    async def on_response(self, request_id: str, response: bytes, error: bytes, caller: str) -> None:
        """Runtime delivery entry point"""
        async with self._operation("on_response"):
            await self.correlator.on_response(request_id, response, error, caller)

    @property
    def last_request_id(self) -> Optional[str]:
        return self.correlator.last_request_id

    @property
    def last_response(self) -> bytes:
        return self.correlator.last_response

    @property
    def last_error(self) -> bytes:
        return self.correlator.last_error

    @property
    def pending_request(self) -> Optional[PendingRequest]:
        return self.correlator.pending

    # ====================
    # Ownership
    # ====================

    @property
    def owner(self) -> str:
        return self.access_control.owner

    @property
    def pending_owner(self) -> Optional[str]:
        return self.access_control.pending_owner

    async def transfer_ownership(self, new_owner: str, caller: str) -> None:
        async with self._operation("transfer_ownership"):
            self.access_control.transfer_ownership(new_owner, caller)

    async def accept_ownership(self, caller: str) -> None:
        async with self._operation("accept_ownership"):
            self.access_control.accept_ownership(caller)


__all__ = ["CrowdRegistryService"]
