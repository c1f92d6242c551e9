"""
Token Ledger

Fixed-name fungible ledger. The whole supply is minted once, at
construction, to the deployer; afterwards units only move between
identities, so the sum of balances always equals the total supply.
"""

import logging

from core.config import ZERO_ADDRESS

from .events.publishers import CrowdRegistryEventPublisher
from .models import LedgerSnapshot, TokenMetadata
from .protocols import (
    InsufficientAllowanceError,
    InsufficientBalanceError,
    InvalidArgumentError,
    LedgerRepositoryProtocol,
    require_amount,
)

logger = logging.getLogger(__name__)


class TokenLedger:
    """Fungible token ledger with mint-at-init, transfer and allowances"""

    def __init__(
        self,
        repository: LedgerRepositoryProtocol,
        metadata: TokenMetadata,
        publisher: CrowdRegistryEventPublisher,
    ):
        self.repository = repository
        self.metadata = metadata
        self.publisher = publisher
        self._minted = False

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def symbol(self) -> str:
        return self.metadata.symbol

    @property
    def decimals(self) -> int:
        return self.metadata.decimals

    # ====================
    # Supply
    # ====================

    async def mint_initial(self, owner: str, amount: int) -> None:
        """Credit the whole supply to owner; allowed exactly once"""
        if self._minted:
            raise InvalidArgumentError("Initial supply already minted")
        if not owner or owner == ZERO_ADDRESS:
            raise InvalidArgumentError("Mint to the zero address")
        require_amount(amount, "supply")

        self.publisher.emit_transfer(ZERO_ADDRESS, owner, amount)
        await self.repository.set_total_supply(amount)
        await self.repository.set_balance(owner, amount)
        self._minted = True
        logger.info(f"Minted {amount} {self.symbol} to {owner}")

    async def total_supply(self) -> int:
        return await self.repository.get_total_supply()

    async def balance_of(self, identity: str) -> int:
        return await self.repository.get_balance(identity)

    # ====================
    # Transfers
    # ====================

    async def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move amount from sender to recipient"""
        self._validate_transfer(sender, recipient, amount)

        sender_balance = await self.repository.get_balance(sender)
        if sender_balance < amount:
            raise InsufficientBalanceError(
                f"{sender} has {sender_balance}, needs {amount}"
            )

        # Event payload is built before any balance write
        self.publisher.emit_transfer(sender, recipient, amount)
        if sender != recipient:
            recipient_balance = await self.repository.get_balance(recipient)
            await self.repository.set_balance(sender, sender_balance - amount)
            await self.repository.set_balance(recipient, recipient_balance + amount)

        logger.debug(f"Transfer {amount} {self.symbol}: {sender} -> {recipient}")

    async def approve(self, owner: str, spender: str, amount: int) -> None:
        """Set the amount spender may move out of owner's balance"""
        if not owner or not spender or spender == ZERO_ADDRESS:
            raise InvalidArgumentError("Approve requires owner and spender")
        require_amount(amount, "allowance")

        self.publisher.emit_approval(owner, spender, amount)
        await self.repository.set_allowance(owner, spender, amount)

    async def allowance(self, owner: str, spender: str) -> int:
        return await self.repository.get_allowance(owner, spender)

    async def transfer_from(self, spender: str, sender: str, recipient: str, amount: int) -> None:
        """Move amount out of sender's balance using spender's allowance"""
        self._validate_transfer(sender, recipient, amount)

        allowed = await self.repository.get_allowance(sender, spender)
        if allowed < amount:
            raise InsufficientAllowanceError(
                f"{spender} may move {allowed} from {sender}, needs {amount}"
            )
        sender_balance = await self.repository.get_balance(sender)
        if sender_balance < amount:
            raise InsufficientBalanceError(
                f"{sender} has {sender_balance}, needs {amount}"
            )

        await self.repository.set_allowance(sender, spender, allowed - amount)
        await self.transfer(sender, recipient, amount)

    async def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            metadata=self.metadata,
            total_supply=await self.repository.get_total_supply(),
            balances=await self.repository.list_balances(),
        )

    @staticmethod
    def _validate_transfer(sender: str, recipient: str, amount: int) -> None:
        if not sender:
            raise InvalidArgumentError("Transfer from an empty identity")
        if not recipient or recipient == ZERO_ADDRESS:
            raise InvalidArgumentError("Transfer to the zero address")
        require_amount(amount)


__all__ = ["TokenLedger"]
