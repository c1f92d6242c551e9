"""
User Registry

Identity -> profile mapping with a mirrored reward balance.
Re-registering an identity updates the profile (name) only; the
accumulated reward balance is kept.
"""

import logging
from typing import List

from .events.publishers import CrowdRegistryEventPublisher
from .models import User, utcnow
from .protocols import InvalidArgumentError, NotFoundError, UserRepositoryProtocol, require_amount

logger = logging.getLogger(__name__)


class UserRegistry:
    """User registration and reward balance mirror"""

    def __init__(
        self,
        repository: UserRepositoryProtocol,
        publisher: CrowdRegistryEventPublisher,
    ):
        self.repository = repository
        self.publisher = publisher

    async def register(self, identity: str, name: str) -> User:
        """Insert the user, or overwrite the name of an existing one"""
        if not identity:
            raise InvalidArgumentError("Identity is required")
        if not name:
            raise InvalidArgumentError("Name cannot be empty")

        existing = await self.repository.get_user(identity)
        if existing:
            user = existing.model_copy(update={"name": name, "updated_at": utcnow()})
        else:
            user = User(identity=identity, name=name)

        self.publisher.emit_user_registered(identity, name)
        user = await self.repository.save_user(user)
        logger.info(f"User registered: {identity}")
        return user

    async def get_user(self, identity: str) -> User:
        user = await self.repository.get_user(identity)
        if not user:
            raise NotFoundError(f"User not registered: {identity}")
        return user

    async def is_registered(self, identity: str) -> bool:
        return await self.repository.get_user(identity) is not None

    async def list_users(self) -> List[User]:
        return await self.repository.list_users()

    async def credit_reward(self, identity: str, amount: int) -> User:
        """Increase the mirrored reward balance"""
        require_amount(amount, "reward amount")
        user = await self.get_user(identity)
        user = user.model_copy(update={"balance": user.balance + amount, "updated_at": utcnow()})
        return await self.repository.save_user(user)


__all__ = ["UserRegistry"]
