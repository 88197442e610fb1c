import pytest
from unittest.mock import AsyncMock, MagicMock
from src.domain.principal import ScopeSource, TenantScope, Principal


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with async commit/rollback"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def tenant_scope():
    """Scope of tenant_a, resolved from its own principal"""
    return TenantScope(
        tenant_id="tenant_a",
        user_id="tenant_a",
        source=ScopeSource.SESSION,
        principal=Principal(id="tenant_a", email="owner@tenant-a.in", user_metadata={"full_name": "Asha"}),
    )
