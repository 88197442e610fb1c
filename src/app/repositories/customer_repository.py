"""Customer Repository Interface"""

from src.app.repositories.base import TenantScopedRepository
from src.domain.customer import Customer


class CustomerRepository(TenantScopedRepository[Customer]):
    """Repository interface for Customer persistence (searches name and company)"""
