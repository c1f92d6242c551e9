"""
Access Control

Single-owner authorization gate. The owner is fixed at construction from
the deploying identity and changes only through a two-step transfer:
the current owner proposes, the proposed owner accepts.
"""

import logging
from typing import Optional

from .events.publishers import CrowdRegistryEventPublisher
from .protocols import InvalidArgumentError, UnauthorizedError

logger = logging.getLogger(__name__)


class AccessControl:
    """Owner gate used by privileged operations"""

    def __init__(self, owner: str, publisher: CrowdRegistryEventPublisher):
        if not owner:
            raise InvalidArgumentError("Owner identity is required")
        self._owner = owner
        self._pending_owner: Optional[str] = None
        self.publisher = publisher

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def pending_owner(self) -> Optional[str]:
        return self._pending_owner

    def is_owner(self, caller: str) -> bool:
        return caller == self._owner

    def require_owner(self, caller: str) -> None:
        """Raise UnauthorizedError unless caller is the owner"""
        if caller != self._owner:
            raise UnauthorizedError(f"Only callable by owner: {caller}")

    def transfer_ownership(self, new_owner: str, caller: str) -> None:
        """Propose a new owner; takes effect once they accept"""
        self.require_owner(caller)
        if not new_owner:
            raise InvalidArgumentError("New owner identity is required")
        if new_owner == caller:
            raise InvalidArgumentError("Cannot transfer to self")

        self._pending_owner = new_owner
        self.publisher.emit_ownership_transfer_requested(self._owner, new_owner)
        logger.info(f"Ownership transfer requested: {self._owner} -> {new_owner}")

    def accept_ownership(self, caller: str) -> None:
        """Complete a pending transfer; only the proposed owner may accept"""
        if self._pending_owner is None or caller != self._pending_owner:
            raise UnauthorizedError(f"Must be proposed owner: {caller}")

        previous = self._owner
        self._owner = caller
        self._pending_owner = None
        self.publisher.emit_ownership_transferred(previous, caller)
        logger.info(f"Ownership transferred: {previous} -> {caller}")


__all__ = ["AccessControl"]
