"""
Local Computation Runtime

In-process stand-in for the off-chain computation router. It allocates
request ids on submission and holds the payloads until a caller delivers a
result with ``deliver``. Delivery is always a separate call from
submission, never made from inside ``submit``.
"""

import hashlib
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..protocols import ResponseCallback

logger = logging.getLogger(__name__)


@dataclass
class SubmittedRequest:
    request_id: str
    payload: bytes
    subscription_id: int
    gas_limit: int
    domain_id: str
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    delivered: bool = False


class LocalComputationRuntime:
    """Router that queues requests for later delivery"""

    def __init__(self, address: str, max_gas_limit: int = 300_000):
        self.address = address
        self.max_gas_limit = max_gas_limit
        self.requests: Dict[str, SubmittedRequest] = {}
        self._nonce = 0
        self._consumer: Optional[ResponseCallback] = None

    def bind_consumer(self, callback: ResponseCallback) -> None:
        self._consumer = callback

    async def submit(
        self,
        encoded_request: bytes,
        subscription_id: int,
        gas_limit: int,
        domain_id: str,
    ) -> str:
        if gas_limit > self.max_gas_limit:
            raise ValueError(f"Gas limit {gas_limit} exceeds router maximum {self.max_gas_limit}")

        self._nonce += 1
        digest = hashlib.sha256()
        for part in (
            self.address.encode(),
            self._nonce.to_bytes(8, "big"),
            subscription_id.to_bytes(8, "big"),
            domain_id.encode(),
            encoded_request,
        ):
            digest.update(part)
        request_id = "0x" + digest.hexdigest()

        self.requests[request_id] = SubmittedRequest(
            request_id=request_id,
            payload=encoded_request,
            subscription_id=subscription_id,
            gas_limit=gas_limit,
            domain_id=domain_id,
        )
        logger.debug(f"Runtime accepted request {request_id}")
        return request_id

    def pending_requests(self) -> List[SubmittedRequest]:
        return [r for r in self.requests.values() if not r.delivered]

    async def deliver(self, request_id: str, response: bytes = b"", error: bytes = b"") -> None:
        """Hand a result for one of this router's requests to the consumer"""
        if self._consumer is None:
            raise RuntimeError("No consumer bound to runtime")
        request = self.requests.get(request_id)
        if request is None:
            raise LookupError(f"Unknown request: {request_id}")

        await self._consumer(request_id, response, error, self.address)
        request.delivered = True


__all__ = ["LocalComputationRuntime", "SubmittedRequest"]
