"""
Crowd Registry Repository

In-memory state holders implementing the repository protocols. State lives
for the lifetime of the process; records are copied in and out so callers
cannot mutate stored state without going through a save.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .models import Campaign, User

logger = logging.getLogger(__name__)


class InMemoryLedgerRepository:
    """Token balances, allowances and total supply"""

    def __init__(self):
        self._balances: Dict[str, int] = {}
        self._allowances: Dict[Tuple[str, str], int] = {}
        self._total_supply: int = 0

    async def initialize(self) -> None:
        logger.info("Ledger repository initialized (in-memory)")

    async def get_balance(self, identity: str) -> int:
        return self._balances.get(identity, 0)

    async def set_balance(self, identity: str, amount: int) -> None:
        if amount:
            self._balances[identity] = amount
        else:
            self._balances.pop(identity, None)

    async def get_total_supply(self) -> int:
        return self._total_supply

    async def set_total_supply(self, amount: int) -> None:
        self._total_supply = amount

    async def get_allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    async def set_allowance(self, owner: str, spender: str, amount: int) -> None:
        if amount:
            self._allowances[(owner, spender)] = amount
        else:
            self._allowances.pop((owner, spender), None)

    async def list_balances(self) -> Dict[str, int]:
        return dict(self._balances)


class InMemoryUserRepository:
    """User records keyed by identity"""

    def __init__(self):
        self._users: Dict[str, User] = {}

    async def initialize(self) -> None:
        logger.info("User repository initialized (in-memory)")

    async def get_user(self, identity: str) -> Optional[User]:
        user = self._users.get(identity)
        return user.model_copy() if user else None

    async def save_user(self, user: User) -> User:
        self._users[user.identity] = user.model_copy()
        return user

    async def list_users(self) -> List[User]:
        return [u.model_copy() for u in self._users.values()]


class InMemoryCampaignRepository:
    """Campaign records keyed by sequential id"""

    def __init__(self):
        self._campaigns: Dict[int, Campaign] = {}

    async def initialize(self) -> None:
        logger.info("Campaign repository initialized (in-memory)")

    async def get_campaign_count(self) -> int:
        return len(self._campaigns)

    async def save_campaign(self, campaign: Campaign) -> Campaign:
        self._campaigns[campaign.campaign_id] = campaign.model_copy()
        return campaign

    async def get_campaign(self, campaign_id: int) -> Optional[Campaign]:
        campaign = self._campaigns.get(campaign_id)
        return campaign.model_copy() if campaign else None

    async def list_campaigns(self, owner: Optional[str] = None) -> List[Campaign]:
        campaigns = sorted(self._campaigns.values(), key=lambda c: c.campaign_id)
        if owner:
            campaigns = [c for c in campaigns if c.owner == owner]
        return [c.model_copy() for c in campaigns]


__all__ = [
    "InMemoryLedgerRepository",
    "InMemoryUserRepository",
    "InMemoryCampaignRepository",
]
