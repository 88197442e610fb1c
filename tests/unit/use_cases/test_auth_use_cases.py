"""Unit tests for authentication use cases"""

import pytest
from src.app.use_cases.auth import (
    GetCurrentPrincipal,
    SignIn,
    SignInCommandDTO,
    SignOut,
    SignUp,
    SignUpCommandDTO,
)
from src.adapter.services.principal_cache import InMemoryPrincipalCache
from src.domain.principal import ScopeSource, TenantScope
from tests.fixtures.fake_identity import FakeIdentityProvider


@pytest.fixture
def provider():
    provider = FakeIdentityProvider()
    provider.add_account("owner@acme.in", "secret1", principal_id="user-1", user_metadata={"full_name": "Owner"})
    return provider


@pytest.mark.asyncio
class TestSignUp:

    async def test_sign_up_stores_full_name(self, provider):
        result = await SignUp(provider).execute(
            SignUpCommandDTO(email="new@acme.in", password="secret1", full_name="Neha Rao")
        )

        assert result.is_ok()
        assert result.value.full_name == "Neha Rao"
        assert result.value.email == "new@acme.in"

    async def test_duplicate_sign_up_is_rejected(self, provider):
        result = await SignUp(provider).execute(
            SignUpCommandDTO(email="owner@acme.in", password="secret1", full_name="Again")
        )

        assert result.error.code == "SIGN_UP_REJECTED"


@pytest.mark.asyncio
class TestSignInOut:

    async def test_sign_in_returns_session_and_fills_cache(self, provider):
        # Arrange
        cache = InMemoryPrincipalCache()
        provider.subscribe(cache.handle_session_event)

        # Act
        result = await SignIn(provider).execute(SignInCommandDTO(email="owner@acme.in", password="secret1"))

        # Assert
        assert result.is_ok()
        assert result.value.token_type == "bearer"
        assert result.value.principal.id == "user-1"
        assert (await cache.get(result.value.access_token)).id == "user-1"

    async def test_wrong_password(self, provider):
        result = await SignIn(provider).execute(SignInCommandDTO(email="owner@acme.in", password="nope"))

        assert result.error.code == "INVALID_CREDENTIALS"

    async def test_provider_down(self, provider):
        provider.unavailable = True

        result = await SignIn(provider).execute(SignInCommandDTO(email="owner@acme.in", password="secret1"))

        assert result.error.code == "IDENTITY_PROVIDER_UNAVAILABLE"

    async def test_sign_out_evicts_cache(self, provider):
        cache = InMemoryPrincipalCache()
        provider.subscribe(cache.handle_session_event)
        session = await provider.sign_in("owner@acme.in", "secret1")

        result = await SignOut(provider).execute(session.access_token)

        assert result.is_ok()
        assert await cache.get(session.access_token) is None
        assert await provider.get_current_session(session.access_token) is None


@pytest.mark.asyncio
class TestGetCurrentPrincipal:

    async def test_describes_scope(self, tenant_scope):
        result = await GetCurrentPrincipal().execute(tenant_scope)

        assert result.value.tenant_id == "tenant_a"
        assert result.value.principal.full_name == "Asha"
        assert result.value.source == ScopeSource.SESSION

    async def test_scope_without_principal(self):
        scope = TenantScope(tenant_id="t", user_id="t")

        result = await GetCurrentPrincipal().execute(scope)

        assert result.error.code == "AUTHENTICATION_REQUIRED"
