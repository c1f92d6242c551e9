"""
Campaign Store

Campaign records keyed by a sequential id starting at 0. Campaigns are
never deleted; the only mutation after creation is the owner-gated
performance score.
"""

import logging
from typing import List, Optional

from .events.publishers import CrowdRegistryEventPublisher
from .models import Campaign, utcnow
from .protocols import (
    CampaignRepositoryProtocol,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    require_amount,
)

logger = logging.getLogger(__name__)


class CampaignStore:
    """Campaign creation, performance updates and lookups"""

    def __init__(
        self,
        repository: CampaignRepositoryProtocol,
        publisher: CrowdRegistryEventPublisher,
    ):
        self.repository = repository
        self.publisher = publisher

    async def create(self, name: str, description: str, reward: int, creator: str) -> Campaign:
        """Create an active campaign owned by creator"""
        self._validate_create(name, description, reward, creator)

        campaign_id = await self.repository.get_campaign_count()
        campaign = Campaign(
            campaign_id=campaign_id,
            name=name,
            description=description,
            reward=reward,
            owner=creator,
        )
        # Event id is the stored id
        self.publisher.emit_campaign_created(
            campaign.campaign_id, campaign.name, campaign.description, campaign.reward, campaign.owner
        )
        campaign = await self.repository.save_campaign(campaign)
        logger.info(f"Campaign created: {campaign_id} by {creator}")
        return campaign

    async def update_performance(self, campaign_id: int, new_value: int, caller: str) -> Campaign:
        """Overwrite the performance score; owner only"""
        campaign = await self.get(campaign_id)
        if caller != campaign.owner:
            raise UnauthorizedError(f"Not the campaign owner: {caller}")
        require_amount(new_value, "performance")

        self.publisher.emit_campaign_performance_updated(campaign_id, new_value)
        campaign = campaign.model_copy(update={"performance": new_value, "updated_at": utcnow()})
        campaign = await self.repository.save_campaign(campaign)
        logger.info(f"Campaign {campaign_id} performance updated: {new_value}")
        return campaign

    async def get(self, campaign_id: int) -> Campaign:
        campaign = await self.repository.get_campaign(campaign_id)
        if not campaign:
            raise NotFoundError(f"Campaign not found: {campaign_id}")
        return campaign

    async def campaign_count(self) -> int:
        return await self.repository.get_campaign_count()

    async def list_campaigns(self, owner: Optional[str] = None) -> List[Campaign]:
        return await self.repository.list_campaigns(owner=owner)

    @staticmethod
    def _validate_create(name: str, description: str, reward: int, creator: str) -> None:
        if not name:
            raise InvalidArgumentError("Name cannot be empty")
        if not description:
            raise InvalidArgumentError("Description cannot be empty")
        require_amount(reward, "reward")
        if reward <= 0:
            raise InvalidArgumentError("Reward must be greater than 0")
        if not creator:
            raise InvalidArgumentError("Creator identity is required")


__all__ = ["CampaignStore"]
