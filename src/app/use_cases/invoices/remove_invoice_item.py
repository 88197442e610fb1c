"""RemoveInvoiceItem Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_draft import LineItemNotFound
from src.domain.principal import TenantScope
from .dtos import InvoiceResponseDTO
from .invoice_drafts import (
    build_invoice_response,
    customer_name_of,
    invoice_not_found,
    load_draft,
    persist_draft,
)

logger = logging.getLogger(__name__)


class RemoveInvoiceItem:

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo

    async def execute(
        self,
        scope: TenantScope,
        invoice_id: str,
        item_id: str,
    ) -> Result[InvoiceResponseDTO]:
        try:
            loaded = await load_draft(self.invoice_repo, self.invoice_line_repo, scope.tenant_id, invoice_id)
            if not loaded:
                return Return.err(invoice_not_found(invoice_id))
            invoice, draft = loaded

            try:
                draft.remove_item(item_id)
            except LineItemNotFound:
                return Return.err(
                    Error(
                        code="INVOICE_ITEM_NOT_FOUND",
                        message=f"Item {item_id} not found on invoice {invoice_id}",
                        reason="Line item does not exist",
                    )
                )

            customer_name = await customer_name_of(self.customer_repo, scope.tenant_id, invoice.customer_id)
            saved = await persist_draft(self.invoice_repo, self.invoice_line_repo, invoice, draft)
            await self.uow.commit()

            return Return.ok(build_invoice_response(saved, draft, customer_name))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to remove item {item_id} from invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="REMOVE_INVOICE_ITEM_FAILED",
                    message="Failed to remove invoice item",
                    reason=str(e),
                )
            )
