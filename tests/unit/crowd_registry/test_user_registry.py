"""
Unit Tests for UserRegistry
"""

import pytest

from microservices.crowd_registry_service.protocols import InvalidArgumentError, NotFoundError

from tests.fixtures import event_types


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_emits_event(self, user_registry, alice, publisher):
        await user_registry.register(alice, "Alice")

        assert event_types(publisher) == ["registry.user.registered"]
        assert publisher.pending[0]["data"] == {"identity": alice, "name": "Alice"}

    @pytest.mark.asyncio
    async def test_empty_name_rejected_without_event(self, user_registry, alice, publisher):
        with pytest.raises(InvalidArgumentError):
            await user_registry.register(alice, "")

        assert publisher.pending == []
        assert not await user_registry.is_registered(alice)

    @pytest.mark.asyncio
    async def test_empty_identity_rejected(self, user_registry):
        with pytest.raises(InvalidArgumentError):
            await user_registry.register("", "Alice")

    @pytest.mark.asyncio
    async def test_reregister_updates_name_only(self, user_registry, alice):
        await user_registry.register(alice, "Alice")
        await user_registry.credit_reward(alice, 9)

        user = await user_registry.register(alice, "Bob")

        assert user.name == "Bob"
        assert user.balance == 9
        assert len(await user_registry.list_users()) == 1


class TestCreditReward:

    @pytest.mark.asyncio
    async def test_credit_unregistered_raises(self, user_registry, bob):
        with pytest.raises(NotFoundError):
            await user_registry.credit_reward(bob, 1)

    @pytest.mark.asyncio
    async def test_credit_is_cumulative(self, user_registry, alice):
        await user_registry.register(alice, "Alice")

        await user_registry.credit_reward(alice, 2)
        user = await user_registry.credit_reward(alice, 3)

        assert user.balance == 5
        assert (await user_registry.get_user(alice)).balance == 5

    @pytest.mark.asyncio
    async def test_returned_record_is_a_copy(self, user_registry, alice):
        await user_registry.register(alice, "Alice")

        user = await user_registry.get_user(alice)
        user.name = "Mallory"

        assert (await user_registry.get_user(alice)).name == "Alice"
