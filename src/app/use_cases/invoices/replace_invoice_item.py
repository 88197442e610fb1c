"""ReplaceInvoiceItem Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_draft import LineItemNotFound
from src.domain.principal import TenantScope
from .dtos import ReplaceInvoiceItemCommandDTO, InvoiceResponseDTO
from .invoice_drafts import (
    build_invoice_response,
    customer_name_of,
    invoice_not_found,
    load_draft,
    persist_draft,
)

logger = logging.getLogger(__name__)


class ReplaceInvoiceItem:
    """
    Use Case: Replace fields of a line item

    Business Rules:
    1. Only editable fields can be replaced; amount is always recomputed
    2. Values that break the item's validation yield INVALID_LINE_ITEM
    3. An unknown item id yields INVOICE_ITEM_NOT_FOUND
    """

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
        command: ReplaceInvoiceItemCommandDTO,
    ) -> Result[InvoiceResponseDTO]:
        try:
            loaded = await load_draft(self.invoice_repo, self.invoice_line_repo, scope.tenant_id, invoice_id)
            if not loaded:
                return Return.err(invoice_not_found(invoice_id))
            invoice, draft = loaded

            try:
                draft.replace_item(item_id, **command.changes())
            except LineItemNotFound:
                return Return.err(
                    Error(
                        code="INVOICE_ITEM_NOT_FOUND",
                        message=f"Item {item_id} not found on invoice {invoice_id}",
                        reason="Line item does not exist",
                    )
                )
            except ValueError as e:
                return Return.err(
                    Error(
                        code="INVALID_LINE_ITEM",
                        message="Invalid line item",
                        reason=str(e),
                    )
                )

            customer_name = await customer_name_of(self.customer_repo, scope.tenant_id, invoice.customer_id)
            saved = await persist_draft(self.invoice_repo, self.invoice_line_repo, invoice, draft)
            await self.uow.commit()

            return Return.ok(build_invoice_response(saved, draft, customer_name))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to replace item {item_id} on invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="REPLACE_INVOICE_ITEM_FAILED",
                    message="Failed to update invoice item",
                    reason=str(e),
                )
            )
