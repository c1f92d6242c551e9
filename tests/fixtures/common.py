"""
Common/Shared Fixtures

Base factories and generators used across test layers.
"""
import secrets
from datetime import datetime, timezone


def make_address() -> str:
    """Generate a unique address-like identity"""
    return "0x" + secrets.token_hex(20)


def make_request_id() -> str:
    """Generate a request id the runtime never issued"""
    return "0x" + secrets.token_hex(32)


def make_timestamp() -> str:
    """Generate current UTC timestamp"""
    return datetime.now(timezone.utc).isoformat()
