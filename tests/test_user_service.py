"""Tests for UserService: accounts, login and address book."""

import json

import pytest

from storefront.domain.errors import Conflict, InvalidCredentials, InvalidInput
from storefront.domain.schemas import Address, AuthProvider, ExternalProfile, UserAccount
from storefront.services.user_service import UserService
from storefront.session import ShopSession


def addr(n):
    return Address(
        full_name=f"Name {n}",
        street=f"{n} Street",
        city="Pune",
        state="Maharashtra",
        postal_code="411001",
        phone="+91 9000000000",
    )


class TestRegistration:

    def test_register_creates_account(self, user_service, session, kv):
        user = user_service.register("Asha", "a@x.com", "pw")

        assert user.id.startswith("user_")
        assert user.addresses == []
        assert user.default_address_index == -1
        assert user.provider == AuthProvider.EMAIL
        assert session.user == user
        assert session.is_authenticated
        assert json.loads(kv.get("users"))["data"][0]["email"] == "a@x.com"

    def test_register_twice_conflicts(self, user_service):
        user_service.register("Asha", "a@x.com", "pw")
        with pytest.raises(Conflict):
            user_service.register("Other", "a@x.com", "pw")

    def test_email_match_is_case_sensitive(self, user_service):
        user_service.register("Asha", "a@x.com", "pw")
        user = user_service.register("Asha", "A@x.com", "pw")
        assert user.email == "A@x.com"

    def test_register_requires_email(self, user_service):
        with pytest.raises(InvalidInput):
            user_service.register("Asha", "  ", "pw")


class TestLogin:

    def test_login_registered_user(self, user_service, session):
        registered = user_service.register("Asha", "asha@x.com", "pw")
        user_service.logout()
        assert not session.is_authenticated

        user = user_service.login("asha@x.com", "pw")

        assert user == registered
        assert session.user == registered

    def test_login_unknown_email(self, user_service):
        with pytest.raises(InvalidCredentials):
            user_service.login("nobody@x.com", "pw")

    def test_demo_login_is_not_persisted(self, user_service, kv):
        user = user_service.login("demo.user@x.com", "anything")

        assert user.name == "Test User"
        assert user.email == "demo.user@x.com"
        assert kv.get("users") is None

    def test_demo_login_can_be_disabled(self, session):
        service = UserService(session, delay=0, demo_triggers=())
        with pytest.raises(InvalidCredentials):
            service.login("demo@x.com", "pw")

    def test_logout_clears_user_key(self, user_service, kv):
        user_service.register("Asha", "asha@x.com", "pw")
        assert kv.get("user") is not None

        user_service.logout()

        assert kv.get("user") is None

    def test_user_restored_by_new_session(self, user_service, kv, catalog):
        user = user_service.register("Asha", "asha@x.com", "pw")
        assert ShopSession(kv=kv, catalog=catalog).user == user


class TestExternalIdentity:

    def test_creates_account(self, user_service):
        user = user_service.login_with_external_identity()

        assert user.email == "google.user@example.com"
        assert user.provider == AuthProvider.GOOGLE
        assert user.photo_url

    def test_updates_existing_account_instead_of_duplicating(self, user_service, session):
        existing = user_service.register("Asha", "asha@x.com", "pw")
        user_service.add_address(addr(1))

        profile = ExternalProfile(name="Asha G", email="asha@x.com", photo_url="http://img/1.png")
        user = user_service.login_with_external_identity(profile)

        assert user.id == existing.id
        assert user.name == "Asha"
        assert user.photo_url == "http://img/1.png"
        assert user.provider == AuthProvider.GOOGLE
        assert len(user.addresses) == 1
        assert len(session.user_repo.list_users()) == 1


class TestProfile:

    def test_update_profile_merges(self, user_service, session):
        user_service.register("Asha", "asha@x.com", "pw")

        user = user_service.update_profile({"phone": "+91 1"})

        assert user.phone == "+91 1"
        assert user.name == "Asha"
        assert session.user_repo.find_by_email("asha@x.com").phone == "+91 1"

    def test_update_profile_rejects_taken_email(self, user_service):
        user_service.register("Other", "other@x.com", "pw")
        user_service.register("Asha", "asha@x.com", "pw")

        with pytest.raises(Conflict):
            user_service.update_profile({"email": "other@x.com"})

    def test_update_profile_rejects_unknown_fields(self, user_service):
        user_service.register("Asha", "asha@x.com", "pw")
        with pytest.raises(ValueError):
            user_service.update_profile({"default_address_index": 3})

    def test_mutations_without_user_are_noops(self, user_service):
        assert user_service.update_profile({"name": "X"}) is None
        assert user_service.add_address(addr(1)) is None
        assert user_service.remove_address(0) is None
        assert user_service.default_address() is None


class TestAddresses:

    @pytest.fixture
    def user(self, user_service):
        return user_service.register("Asha", "asha@x.com", "pw")

    def test_first_address_becomes_default(self, user_service, user):
        updated = user_service.add_address(addr(1))

        assert updated.default_address_index == 0
        assert user_service.default_address() == addr(1)

    def test_second_address_keeps_default(self, user_service, user):
        user_service.add_address(addr(1))
        updated = user_service.add_address(addr(2))

        assert updated.default_address_index == 0
        assert len(updated.addresses) == 2

    def test_incomplete_address_rejected(self, user_service, user):
        with pytest.raises(InvalidInput) as exc:
            user_service.add_address(Address(full_name="Asha", city="Pune"))

        assert "street" in str(exc.value)
        assert user_service.session.user.addresses == []

    def test_update_address(self, user_service, user):
        user_service.add_address(addr(1))
        updated = user_service.update_address(0, addr(9))
        assert updated.addresses == [addr(9)]

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_out_of_bounds_is_silently_ignored(self, user_service, user, index):
        before = user_service.add_address(addr(1))

        assert user_service.update_address(index, addr(2)) == before
        assert user_service.remove_address(index) == before
        assert user_service.set_default_address(index) == before

    def test_remove_only_address_resets_default(self, user_service, user):
        user_service.add_address(addr(1))

        updated = user_service.remove_address(0)

        assert updated.addresses == []
        assert updated.default_address_index == -1

    def test_remove_before_default_shifts_index(self, user_service, user):
        for n in range(4):
            user_service.add_address(addr(n))
        user_service.set_default_address(2)

        updated = user_service.remove_address(0)

        assert updated.default_address_index == 1
        assert updated.addresses[1] == addr(2)

    def test_remove_default_falls_back_to_first(self, user_service, user):
        for n in range(3):
            user_service.add_address(addr(n))
        user_service.set_default_address(2)

        updated = user_service.remove_address(2)

        assert updated.default_address_index == 0

    def test_remove_after_default_keeps_index(self, user_service, user):
        for n in range(3):
            user_service.add_address(addr(n))
        user_service.set_default_address(1)

        updated = user_service.remove_address(2)

        assert updated.default_address_index == 1

    def test_address_changes_persisted_to_directory(self, user_service, user, session):
        user_service.add_address(addr(1))
        stored = session.user_repo.find_by_email("asha@x.com")
        assert stored.addresses == [addr(1)]
        assert session.user_repo.get_current() == stored

    def test_invalid_default_index_rejected_at_construction(self):
        with pytest.raises(ValueError):
            UserAccount(name="X", email="x@x.com", default_address_index=0)
