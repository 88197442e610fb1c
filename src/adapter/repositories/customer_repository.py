"""SQLAlchemy Customer Repository Implementation"""

from src.adapter.repositories.base import SqlAlchemyTenantScopedRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(SqlAlchemyTenantScopedRepository[Customer], CustomerRepository):
    model = Customer
    search_fields = ("customer_name", "company_name")
