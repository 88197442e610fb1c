"""UpdateCustomer Use Case

Applies a typed partial update to a customer of the caller's tenant.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.principal import TenantScope
from .dtos import UpdateCustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


class UpdateCustomer:
    """
    Use Case: Update customer

    Business Rules:
    1. Only fields present in the command change
    2. A customer of another tenant is reported as not found
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(
        self,
        scope: TenantScope,
        customer_id: str,
        command: UpdateCustomerCommandDTO,
    ) -> Result[CustomerResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(scope.tenant_id, customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer {customer_id} not found",
                        reason="Customer does not exist in this tenant",
                    )
                )

            for field, value in command.changes().items():
                setattr(customer, field, value)

            updated = await self.customer_repo.update(customer)
            await self.uow.commit()

            return Return.ok(CustomerResponseDTO.model_validate(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update customer {customer_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )
