"""CreateCustomer Use Case

Adds a customer to the caller's tenant.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from src.domain.principal import TenantScope
from .dtos import CreateCustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


class CreateCustomer:
    """
    Use Case: Create customer

    Business Rules:
    1. The customer is stamped with the scope's tenant_id and user_id
    2. Billing address country defaults to India

    Flow:
    1. Build the Customer from the validated command
    2. Persist and commit
    3. Return response
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(
        self,
        scope: TenantScope,
        command: CreateCustomerCommandDTO,
    ) -> Result[CustomerResponseDTO]:
        try:
            data = command.model_dump()
            customer = Customer(tenant_id=scope.tenant_id, user_id=scope.user_id, **data)

            created = await self.customer_repo.create(customer)
            await self.uow.commit()

            logger.info(f"Customer {created.id} created for tenant {scope.tenant_id}")
            return Return.ok(CustomerResponseDTO.model_validate(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create customer for tenant {scope.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )
