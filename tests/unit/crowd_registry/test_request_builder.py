"""
Unit Tests for the computation request builder
"""

import json

import pytest

from microservices.crowd_registry_service.models import SecretsLocation
from microservices.crowd_registry_service.protocols import InvalidArgumentError
from microservices.crowd_registry_service.request_builder import (
    build_request,
    decode_request,
    encode_request,
    request_sections,
)

SOURCE = "return Functions.encodeString('hi');"


class TestBuildRequest:

    def test_source_only(self):
        request = build_request(SOURCE)

        assert request.source == SOURCE
        assert request.secrets_location is None
        assert request_sections(request) == []

    def test_empty_source_rejected(self):
        with pytest.raises(InvalidArgumentError):
            build_request("")

    def test_remote_reference_wins_over_hosted(self):
        request = build_request(SOURCE, secrets_ref=b"\x01\x02", secrets_slot=1, secrets_version=7)

        assert request.secrets_location == SecretsLocation.REMOTE
        assert request.encrypted_secrets_reference == "0x0102"
        assert request.hosted_secrets is None

    def test_hosted_pointer_needs_positive_version(self):
        assert build_request(SOURCE, secrets_slot=2, secrets_version=0).secrets_location is None

        request = build_request(SOURCE, secrets_slot=2, secrets_version=5)

        assert request.secrets_location == SecretsLocation.HOSTED
        assert (request.hosted_secrets.slot_id, request.hosted_secrets.version) == (2, 5)

    def test_args_only_when_non_empty(self):
        request = build_request(SOURCE, args=[], bytes_args=[b"\xff"])

        assert request.args == []
        assert request.bytes_args == ["0xff"]
        assert request_sections(request) == ["bytes_args"]

    def test_all_sections(self):
        request = build_request(SOURCE, secrets_ref=b"\x01", args=["a"], bytes_args=[b"\x00"])

        assert request_sections(request) == ["remote_secrets", "args", "bytes_args"]


class TestEncoding:

    def test_unset_sections_omitted(self):
        payload = json.loads(encode_request(build_request(SOURCE)))

        assert payload["source"] == SOURCE
        assert "hosted_secrets" not in payload
        assert "encrypted_secrets_reference" not in payload

    def test_decode_restores_request(self):
        request = build_request(SOURCE, secrets_slot=1, secrets_version=3, args=["x", "y"])

        assert decode_request(encode_request(request)) == request
