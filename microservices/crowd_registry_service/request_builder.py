"""
Computation Request Builder

Assembles the request payload for the computation runtime from its parts
and encodes it to bytes. Secrets are attached by remote reference when one
is supplied; otherwise a hosted slot/version pointer is attached when the
version is positive. The two mechanisms never appear together.
"""

from typing import List, Optional, Sequence

from .models import (
    CodeLanguage,
    CodeLocation,
    FunctionsRequest,
    HostedSecretsPointer,
    SecretsLocation,
)
from .protocols import InvalidArgumentError


def build_request(
    source_code: str,
    secrets_ref: Optional[bytes] = None,
    secrets_slot: int = 0,
    secrets_version: int = 0,
    args: Optional[Sequence[str]] = None,
    bytes_args: Optional[Sequence[bytes]] = None,
) -> FunctionsRequest:
    """Build an inline JavaScript request"""
    if not source_code:
        raise InvalidArgumentError("Source code cannot be empty")
    if secrets_slot < 0 or secrets_version < 0:
        raise InvalidArgumentError("Secrets slot and version must be non-negative")

    request = FunctionsRequest(
        code_location=CodeLocation.INLINE,
        language=CodeLanguage.JAVASCRIPT,
        source=source_code,
    )

    if secrets_ref:
        request.secrets_location = SecretsLocation.REMOTE
        request.encrypted_secrets_reference = "0x" + bytes(secrets_ref).hex()
    elif secrets_version > 0:
        request.secrets_location = SecretsLocation.HOSTED
        request.hosted_secrets = HostedSecretsPointer(slot_id=secrets_slot, version=secrets_version)

    if args:
        request.args = list(args)
    if bytes_args:
        request.bytes_args = ["0x" + bytes(arg).hex() for arg in bytes_args]

    return request


def encode_request(request: FunctionsRequest) -> bytes:
    """Serialize for submission; unset optional sections are omitted"""
    return request.model_dump_json(exclude_none=True).encode("utf-8")


def decode_request(payload: bytes) -> FunctionsRequest:
    """Parse an encoded payload (used by runtimes and tests)"""
    return FunctionsRequest.model_validate_json(payload)


def request_sections(request: FunctionsRequest) -> List[str]:
    """Names of the optional sections present in a request"""
    sections = []
    if request.secrets_location == SecretsLocation.REMOTE:
        sections.append("remote_secrets")
    elif request.secrets_location == SecretsLocation.HOSTED:
        sections.append("hosted_secrets")
    if request.args:
        sections.append("args")
    if request.bytes_args:
        sections.append("bytes_args")
    return sections


__all__ = ["build_request", "encode_request", "decode_request", "request_sections"]
