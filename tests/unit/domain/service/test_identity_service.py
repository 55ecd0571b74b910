"""Unit tests for IdentityService."""

import pytest

from sodfa.domain.error import IdentityUnavailableError
from sodfa.domain.model import SessionIdentity
from sodfa.domain.service import IdentityService
from sodfa.domain.service.identity_service import classify
from sodfa.domain.value import IdentityClass
from tests.conftest import ANONYMOUS_NAME, FALLBACK_NAME, PSEUDO_TOKEN
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

DURABLE = SessionIdentity(uid="uid-durable", display_name="Amira", email="a@x.io")
EPHEMERAL = SessionIdentity(uid="uid-ephemeral", is_ephemeral=True)


class TestClassify:
    """Resolution order."""

    def test_durable_session_wins_over_pseudo_token(self):
        assert classify(DURABLE, PSEUDO_TOKEN) == IdentityClass.AUTHENTICATED

    def test_pseudo_token_wins_over_ephemeral_session(self):
        assert classify(EPHEMERAL, PSEUDO_TOKEN) == IdentityClass.PSEUDO

    def test_ephemeral_session_alone_is_shadow(self):
        assert classify(EPHEMERAL, None) == IdentityClass.SHADOW

    def test_nothing_is_none(self):
        assert classify(None, None) is None
        assert classify(None, "") is None


class TestResolve:
    """Tests for resolve method."""

    @pytest.mark.asyncio
    async def test_authenticated_identity(self, unit_env):
        """Durable account keeps its uid and name."""
        service = await unit_env.get(IdentityService)

        identity = service.resolve(DURABLE, None)

        assert identity.identity_class == IdentityClass.AUTHENTICATED
        assert identity.owner_key == "uid-durable"
        assert identity.display_name == "Amira"
        assert identity.is_anonymous is False
        assert identity.is_trackable is True

    @pytest.mark.asyncio
    async def test_authenticated_without_name_gets_fallback(self, unit_env):
        service = await unit_env.get(IdentityService)

        identity = service.resolve(SessionIdentity(uid="u1"), None)

        assert identity.display_name == FALLBACK_NAME

    @pytest.mark.asyncio
    async def test_pseudo_identity(self, unit_env):
        """Pseudo token becomes a client_ owner key."""
        service = await unit_env.get(IdentityService)

        identity = service.resolve(EPHEMERAL, PSEUDO_TOKEN)

        assert identity.identity_class == IdentityClass.PSEUDO
        assert identity.owner_key == f"client_{PSEUDO_TOKEN}"
        assert identity.display_name == ANONYMOUS_NAME
        assert identity.is_anonymous is True
        assert identity.is_trackable is False

    @pytest.mark.asyncio
    async def test_shadow_identity(self, unit_env):
        service = await unit_env.get(IdentityService)

        identity = service.resolve(EPHEMERAL, "   ")

        assert identity.identity_class == IdentityClass.SHADOW
        assert identity.owner_key == "uid-ephemeral"
        assert identity.display_name == ANONYMOUS_NAME
        assert identity.is_anonymous is True
        assert identity.is_trackable is True

    @pytest.mark.asyncio
    async def test_no_identity_raises(self, unit_env):
        """Missing identity is a distinct failure, never a default."""
        service = await unit_env.get(IdentityService)

        with pytest.raises(IdentityUnavailableError):
            service.resolve(None, None)
