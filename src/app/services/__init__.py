from .unit_of_work import UnitOfWork
from .pdf_service import PdfService, CompanyDetails
from .identity_provider import (
    IdentityProvider,
    IdentityProviderError,
    InvalidCredentials,
)
from .principal_cache import PrincipalCache
from .identifier_generator import IdentifierGenerator
from .tenant_resolver import TenantResolver

__all__ = [
    "UnitOfWork",
    "PdfService",
    "CompanyDetails",
    "IdentityProvider",
    "IdentityProviderError",
    "InvalidCredentials",
    "PrincipalCache",
    "IdentifierGenerator",
    "TenantResolver",
]
