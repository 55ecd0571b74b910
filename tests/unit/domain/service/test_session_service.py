"""Unit tests for SessionService."""

from unittest.mock import AsyncMock

import pytest

from sodfa.adapter.error import IdentityProviderError
from sodfa.domain.error import AuthenticationError, InfrastructureError, ValidationError
from sodfa.domain.service import IdentityProvider, SessionService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSessionService:
    """Sessions through the mock identity provider."""

    @pytest.mark.asyncio
    async def test_ephemeral_session(self, unit_env):
        service = await unit_env.get(SessionService)

        session = await service.create_ephemeral_session()

        assert session.is_ephemeral is True
        assert session.uid

    @pytest.mark.asyncio
    async def test_sign_up_and_sign_in(self, unit_env):
        service = await unit_env.get(SessionService)

        created = await service.sign_up(" a@x.io ", "secret1", " Amira ")
        signed_in = await service.sign_in("a@x.io", "secret1")

        assert created.display_name == "Amira"
        assert signed_in.uid == created.uid
        assert signed_in.is_ephemeral is False

    @pytest.mark.asyncio
    async def test_duplicate_email_is_validation_error(self, unit_env):
        service = await unit_env.get(SessionService)
        await service.sign_up("a@x.io", "secret1")

        with pytest.raises(ValidationError):
            await service.sign_up("a@x.io", "secret2")

    @pytest.mark.asyncio
    async def test_missing_credentials(self, unit_env):
        service = await unit_env.get(SessionService)

        with pytest.raises(ValidationError):
            await service.sign_up("", "secret1")

    @pytest.mark.asyncio
    async def test_wrong_password_is_authentication_error(self, unit_env):
        service = await unit_env.get(SessionService)
        await service.sign_up("a@x.io", "secret1")

        with pytest.raises(AuthenticationError):
            await service.sign_in("a@x.io", "wrong")

    @pytest.mark.asyncio
    async def test_provider_outage_is_infrastructure_error(self):
        provider = AsyncMock(spec=IdentityProvider)
        provider.create_ephemeral_session.side_effect = IdentityProviderError(
            "HTTP error calling accounts:signUp"
        )
        service = SessionService(identity_provider=provider)

        with pytest.raises(InfrastructureError):
            await service.create_ephemeral_session()
