"""
Unit Tests for AccessControl
"""

import pytest

from microservices.crowd_registry_service.access_control import AccessControl
from microservices.crowd_registry_service.protocols import InvalidArgumentError, UnauthorizedError
from tests.fixtures import event_types


def test_owner_required_at_construction(publisher):
    with pytest.raises(InvalidArgumentError):
        AccessControl(owner="", publisher=publisher)


def test_require_owner(access_control, owner, alice):
    access_control.require_owner(owner)

    with pytest.raises(UnauthorizedError):
        access_control.require_owner(alice)


class TestOwnershipTransfer:

    def test_two_step_transfer(self, access_control, owner, alice, publisher):
        access_control.transfer_ownership(alice, owner)

        assert access_control.owner == owner
        assert access_control.pending_owner == alice

        access_control.accept_ownership(alice)

        assert access_control.owner == alice
        assert access_control.pending_owner is None
        assert event_types(publisher) == [
            "registry.ownership.transfer_requested",
            "registry.ownership.transferred",
        ]

    def test_only_owner_proposes(self, access_control, alice, bob):
        with pytest.raises(UnauthorizedError):
            access_control.transfer_ownership(bob, alice)

    def test_cannot_transfer_to_self(self, access_control, owner):
        with pytest.raises(InvalidArgumentError):
            access_control.transfer_ownership(owner, owner)

    def test_only_proposed_owner_accepts(self, access_control, owner, alice, bob):
        access_control.transfer_ownership(alice, owner)

        with pytest.raises(UnauthorizedError):
            access_control.accept_ownership(bob)
        assert access_control.owner == owner

    def test_accept_without_proposal(self, access_control, alice):
        with pytest.raises(UnauthorizedError):
            access_control.accept_ownership(alice)

    def test_previous_owner_loses_rights(self, access_control, owner, alice):
        access_control.transfer_ownership(alice, owner)
        access_control.accept_ownership(alice)

        assert not access_control.is_owner(owner)
        with pytest.raises(UnauthorizedError):
            access_control.require_owner(owner)
