"""GetCustomer Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.principal import TenantScope
from .dtos import CustomerResponseDTO


class GetCustomer:

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, scope: TenantScope, customer_id: str) -> Result[CustomerResponseDTO]:
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
            return Return.ok(CustomerResponseDTO.model_validate(customer))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_CUSTOMER_FAILED",
                    message="Failed to load customer",
                    reason=str(e),
                )
            )
