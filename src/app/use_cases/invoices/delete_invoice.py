"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.principal import TenantScope
from .invoice_drafts import invoice_not_found

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice and its lines

    Matches both id and tenant id; an id of another tenant deletes nothing
    and is reported as INVOICE_NOT_FOUND.
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, scope: TenantScope, invoice_id: str) -> Result[None]:
        try:
            deleted = await self.invoice_repo.delete(scope.tenant_id, invoice_id)
            if not deleted:
                await self.uow.rollback()
                return Return.err(invoice_not_found(invoice_id))

            await self.uow.commit()
            logger.info(f"Invoice {invoice_id} deleted for tenant {scope.tenant_id}")
            return Return.ok()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
