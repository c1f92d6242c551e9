"""
Crowd Registry Service Models

Defines data models for users, campaigns, the token ledger, and
off-chain computation requests.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.config import ZERO_ADDRESS


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ====================
# Registry Records
# ====================

class User(BaseModel):
    """Registered participant; profile fields are kept apart from the reward balance"""
    model_config = ConfigDict(from_attributes=True)

    identity: str
    name: str = Field(..., min_length=1)
    balance: int = Field(default=0, ge=0, description="Cumulative reward balance")
    registered_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Campaign(BaseModel):
    """Crowdsourced campaign record"""
    model_config = ConfigDict(from_attributes=True)

    campaign_id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    reward: int = Field(..., gt=0)
    owner: str
    active: bool = True
    performance: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# ====================
# Token Ledger
# ====================

class TokenMetadata(BaseModel):
    """Fixed token identity"""
    name: str
    symbol: str
    decimals: int = Field(default=18, ge=0)


class LedgerSnapshot(BaseModel):
    """Read-only view of the ledger at a point in time"""
    metadata: TokenMetadata
    total_supply: int = Field(..., ge=0)
    balances: Dict[str, int] = Field(default_factory=dict)


# ====================
# Computation Requests
# ====================

class CodeLocation(str, Enum):
    """Where the runtime finds the source to execute"""
    INLINE = "inline"


class CodeLanguage(str, Enum):
    JAVASCRIPT = "javascript"


class SecretsLocation(str, Enum):
    """Secrets delivery mechanism; remote reference and hosted slot are exclusive"""
    REMOTE = "remote"
    HOSTED = "hosted"


class HostedSecretsPointer(BaseModel):
    slot_id: int = Field(..., ge=0)
    version: int = Field(..., gt=0)


class FunctionsRequest(BaseModel):
    """Request payload handed to the computation runtime"""
    code_location: CodeLocation = CodeLocation.INLINE
    language: CodeLanguage = CodeLanguage.JAVASCRIPT
    source: str = Field(..., min_length=1)

    secrets_location: Optional[SecretsLocation] = None
    encrypted_secrets_reference: Optional[str] = None  # hex
    hosted_secrets: Optional[HostedSecretsPointer] = None

    args: List[str] = Field(default_factory=list)
    bytes_args: List[str] = Field(default_factory=list)  # hex


class PendingRequest(BaseModel):
    """Metadata for the request currently awaiting its response"""
    request_id: str
    subscription_id: int
    gas_limit: int
    domain_id: str
    issued_by: str
    issued_at: datetime = Field(default_factory=utcnow)
    raw: bool = False


class CorrelatorState(BaseModel):
    """Single-slot correlation state owned by one RequestCorrelator"""
    last_request_id: Optional[str] = None
    pending: Optional[PendingRequest] = None
    consumed: bool = False
    last_response: bytes = b""
    last_error: bytes = b""
    responses_accepted: int = 0


# ====================
# Service Responses
# ====================

class RequestReceipt(BaseModel):
    """Result of issuing a computation request"""
    request_id: str
    subscription_id: int
    gas_limit: int
    domain_id: str
    payload_size: int


class RewardReceipt(BaseModel):
    """Result of a reward distribution"""
    sender: str
    target: str
    amount: int
    sender_balance: int
    target_ledger_balance: int
    target_reward_balance: int


__all__ = [
    "ZERO_ADDRESS",
    "utcnow",
    "User",
    "Campaign",
    "TokenMetadata",
    "LedgerSnapshot",
    "CodeLocation",
    "CodeLanguage",
    "SecretsLocation",
    "HostedSecretsPointer",
    "FunctionsRequest",
    "PendingRequest",
    "CorrelatorState",
    "RequestReceipt",
    "RewardReceipt",
]
