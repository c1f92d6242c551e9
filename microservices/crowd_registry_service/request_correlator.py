"""
Request Correlator

Issues off-chain computation requests and matches their asynchronous
responses. Exactly one request is tracked at a time: issuing a new one
supersedes the previous id, and a response is accepted only for the
current id and only once.
"""

import logging
from typing import Optional, Sequence

from .access_control import AccessControl
from .events.publishers import CrowdRegistryEventPublisher
from .models import CorrelatorState, PendingRequest, RequestReceipt
from .protocols import (
    ComputationRuntimeProtocol,
    CrowdRegistryError,
    InvalidArgumentError,
    RuntimeSubmissionError,
    UnauthorizedError,
    UnexpectedRequestIDError,
    require_amount,
)
from .request_builder import build_request, encode_request

logger = logging.getLogger(__name__)


class RequestCorrelator:
    """Single-slot request/response correlation"""

    def __init__(
        self,
        runtime: ComputationRuntimeProtocol,
        access_control: AccessControl,
        publisher: CrowdRegistryEventPublisher,
        state: Optional[CorrelatorState] = None,
    ):
        self.runtime = runtime
        self.access_control = access_control
        self.publisher = publisher
        self.state = state or CorrelatorState()

    # ====================
    # Queries
    # ====================

    @property
    def last_request_id(self) -> Optional[str]:
        return self.state.last_request_id

    @property
    def last_response(self) -> bytes:
        return self.state.last_response

    @property
    def last_error(self) -> bytes:
        return self.state.last_error

    @property
    def pending(self) -> Optional[PendingRequest]:
        """The outstanding request, or None once its response was accepted"""
        return None if self.state.consumed else self.state.pending

    # ====================
    # Issuing
    # ====================

    async def issue_request(
        self,
        source_code: str,
        secrets_ref: Optional[bytes],
        secrets_slot: int,
        secrets_version: int,
        args: Optional[Sequence[str]],
        bytes_args: Optional[Sequence[bytes]],
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
        caller: str,
    ) -> RequestReceipt:
        """Build, submit and track a request; owner only"""
        self.access_control.require_owner(caller)
        request = build_request(
            source_code,
            secrets_ref=secrets_ref,
            secrets_slot=secrets_slot,
            secrets_version=secrets_version,
            args=args,
            bytes_args=bytes_args,
        )
        return await self._submit(
            encode_request(request), subscription_id, gas_limit, domain_id, caller, raw=False
        )

    async def issue_raw_request(
        self,
        payload: bytes,
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
        caller: str,
    ) -> RequestReceipt:
        """Submit and track a pre-encoded request; owner only"""
        self.access_control.require_owner(caller)
        if not payload:
            raise InvalidArgumentError("Request payload cannot be empty")
        return await self._submit(bytes(payload), subscription_id, gas_limit, domain_id, caller, raw=True)

    async def _submit(
        self,
        payload: bytes,
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
        caller: str,
        raw: bool,
    ) -> RequestReceipt:
        require_amount(subscription_id, "subscription id")
        if require_amount(gas_limit, "gas limit") == 0:
            raise InvalidArgumentError("Gas limit must be positive")

        try:
            request_id = await self.runtime.submit(payload, subscription_id, gas_limit, domain_id)
        except CrowdRegistryError:
            raise
        except Exception as e:
            raise RuntimeSubmissionError(f"Runtime rejected request: {e}") from e

        self.publisher.emit_request_sent(request_id, subscription_id, domain_id)
        superseded = None if self.state.consumed else self.state.last_request_id
        self.state = self.state.model_copy(update={
            "last_request_id": request_id,
            "consumed": False,
            "pending": PendingRequest(
                request_id=request_id,
                subscription_id=subscription_id,
                gas_limit=gas_limit,
                domain_id=domain_id,
                issued_by=caller,
                raw=raw,
            ),
        })

        if superseded:
            logger.warning(f"Request {superseded} superseded by {request_id}")
        logger.info(f"Request sent: {request_id} (subscription {subscription_id})")

        return RequestReceipt(
            request_id=request_id,
            subscription_id=subscription_id,
            gas_limit=gas_limit,
            domain_id=domain_id,
            payload_size=len(payload),
        )

    # ====================
    # Fulfillment
    # ====================

    async def on_response(self, request_id: str, response: bytes, error: bytes, caller: str) -> None:
        """Accept the runtime's delivery for the outstanding request"""
        if caller != self.runtime.address:
            raise UnauthorizedError(f"Only the runtime router may deliver: {caller}")
        if (
            self.state.last_request_id is None
            or self.state.consumed
            or request_id != self.state.last_request_id
        ):
            raise UnexpectedRequestIDError(f"Unexpected request id: {request_id}")

        response = bytes(response or b"")
        error = bytes(error or b"")
        self.publisher.emit_response(request_id, response, error)
        self.state = self.state.model_copy(update={
            "last_response": response,
            "last_error": error,
            "consumed": True,
            "responses_accepted": self.state.responses_accepted + 1,
        })

        logger.info(f"Response accepted: {request_id} ({len(response)} bytes, error {len(error)} bytes)")


__all__ = ["RequestCorrelator"]
