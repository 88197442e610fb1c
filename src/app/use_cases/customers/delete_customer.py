"""DeleteCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.principal import TenantScope

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete customer

    The delete matches both id and tenant id; when nothing matched the
    outcome is CUSTOMER_NOT_FOUND and no other tenant's row is touched.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, scope: TenantScope, customer_id: str) -> Result[None]:
        try:
            deleted = await self.customer_repo.delete(scope.tenant_id, customer_id)
            if not deleted:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer {customer_id} not found",
                        reason="Customer does not exist in this tenant",
                    )
                )

            await self.uow.commit()
            logger.info(f"Customer {customer_id} deleted for tenant {scope.tenant_id}")
            return Return.ok()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete customer {customer_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )
