"""
Crowd Registry Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import Campaign, User


# ============================================================================
# Custom Exceptions - defined here to avoid importing repository
# ============================================================================

class CrowdRegistryError(Exception):
    """Base error for every rejected registry operation"""
    pass


class InvalidArgumentError(CrowdRegistryError, ValueError):
    """Empty required string, non-positive amount, or other malformed input"""
    pass


class UnauthorizedError(CrowdRegistryError):
    """Caller is not the resource owner or the designated system owner"""
    pass


class InsufficientBalanceError(CrowdRegistryError):
    """Ledger transfer exceeds available funds"""
    pass


class InsufficientAllowanceError(InsufficientBalanceError):
    """Delegated transfer exceeds the approved allowance"""
    pass


class UnexpectedRequestIDError(CrowdRegistryError):
    """Response does not match the tracked outstanding request"""
    pass


class NotFoundError(CrowdRegistryError, LookupError):
    """Lookup of a never-created entity"""
    pass


class RuntimeSubmissionError(CrowdRegistryError):
    """Computation runtime refused the submitted request"""
    pass


def require_amount(value: Any, label: str = "amount") -> int:
    """
    Reject anything but a non-negative int.

    bool is an int subclass and is refused explicitly; floats, Decimals and
    numeric strings are refused rather than coerced.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label} must be an integer: {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"Invalid {label}: {value}")
    return value


# ============================================================================
# Repository Protocols
# ============================================================================

@runtime_checkable
class LedgerRepositoryProtocol(Protocol):
    """Interface for token ledger storage"""

    async def get_balance(self, identity: str) -> int:
        """Get balance (0 for unknown identities)"""
        ...

    async def set_balance(self, identity: str, amount: int) -> None:
        """Overwrite balance"""
        ...

    async def get_total_supply(self) -> int:
        ...

    async def set_total_supply(self, amount: int) -> None:
        ...

    async def get_allowance(self, owner: str, spender: str) -> int:
        ...

    async def set_allowance(self, owner: str, spender: str, amount: int) -> None:
        ...

    async def list_balances(self) -> Dict[str, int]:
        """All non-zero balances"""
        ...


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """Interface for user storage"""

    async def get_user(self, identity: str) -> Optional[User]:
        ...

    async def save_user(self, user: User) -> User:
        ...

    async def list_users(self) -> List[User]:
        ...


@runtime_checkable
class CampaignRepositoryProtocol(Protocol):
    """Interface for campaign storage"""

    async def get_campaign_count(self) -> int:
        """Number of campaigns ever created; also the next id"""
        ...

    async def save_campaign(self, campaign: Campaign) -> Campaign:
        ...

    async def get_campaign(self, campaign_id: int) -> Optional[Campaign]:
        ...

    async def list_campaigns(self, owner: Optional[str] = None) -> List[Campaign]:
        ...


# ============================================================================
# Client Protocols
# ============================================================================

@runtime_checkable
class EventBusProtocol(Protocol):
    """Interface for Event Bus - no I/O imports"""

    async def publish_event(self, event: Any) -> bool:
        """Publish an event"""
        ...

    async def subscribe_to_events(
        self, pattern: str, handler: Any, durable: Optional[str] = None
    ) -> None:
        """Subscribe to events matching a pattern"""
        ...


ResponseCallback = Callable[[str, bytes, bytes, str], Awaitable[None]]


@runtime_checkable
class ComputationRuntimeProtocol(Protocol):
    """
    Interface for the off-chain computation runtime (router).

    ``submit`` is fire-and-forget: it returns a freshly allocated request id
    and the result arrives later through the bound response callback,
    invoked with the runtime's own ``address`` as caller.
    """

    address: str

    def bind_consumer(self, callback: ResponseCallback) -> None:
        """Register the callback that receives deliveries"""
        ...

    async def submit(
        self,
        encoded_request: bytes,
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
    ) -> str:
        """Submit a request, returning its unique id"""
        ...


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Exceptions
    "CrowdRegistryError",
    "InvalidArgumentError",
    "UnauthorizedError",
    "InsufficientBalanceError",
    "InsufficientAllowanceError",
    "UnexpectedRequestIDError",
    "NotFoundError",
    "RuntimeSubmissionError",
    "require_amount",
    # Protocols
    "LedgerRepositoryProtocol",
    "UserRepositoryProtocol",
    "CampaignRepositoryProtocol",
    "EventBusProtocol",
    "ComputationRuntimeProtocol",
    "ResponseCallback",
]
