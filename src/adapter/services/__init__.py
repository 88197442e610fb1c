from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabPdfService
from .identity_provider import GoTrueIdentityProvider
from .principal_cache import (
    InMemoryPrincipalCache,
    RedisPrincipalCache,
    create_principal_cache,
)

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabPdfService",
    "GoTrueIdentityProvider",
    "InMemoryPrincipalCache",
    "RedisPrincipalCache",
    "create_principal_cache",
]
