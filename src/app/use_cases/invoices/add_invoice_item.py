"""AddInvoiceItem Use Case

Appends a line item to a saved invoice and stores the recomputed totals.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.product_repository import ProductRepository
from src.domain.line_item import LineItem
from src.domain.principal import TenantScope
from .dtos import AddInvoiceItemCommandDTO, InvoiceResponseDTO
from .invoice_drafts import (
    build_invoice_response,
    customer_name_of,
    invoice_not_found,
    load_draft,
    persist_draft,
)

logger = logging.getLogger(__name__)


class AddInvoiceItem:
    """
    Use Case: Add line item

    Business Rules:
    1. With product_id the line is built from the tenant's catalog product:
       rate = unit price, CGST = SGST = half the product tax, HSN = SKU
    2. Otherwise the explicit fields are used
    3. Totals are recomputed and saved with the lines in one transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.product_repo = product_repo
        self.customer_repo = customer_repo

    async def execute(
        self,
        scope: TenantScope,
        invoice_id: str,
        command: AddInvoiceItemCommandDTO,
    ) -> Result[InvoiceResponseDTO]:
        try:
            loaded = await load_draft(self.invoice_repo, self.invoice_line_repo, scope.tenant_id, invoice_id)
            if not loaded:
                return Return.err(invoice_not_found(invoice_id))
            invoice, draft = loaded

            if command.product_id:
                product = await self.product_repo.get_by_id(scope.tenant_id, command.product_id)
                if not product:
                    return Return.err(
                        Error(
                            code="PRODUCT_NOT_FOUND",
                            message=f"Product {command.product_id} not found",
                            reason="Product does not exist in this tenant",
                        )
                    )
                item = LineItem.from_product(product, quantity=command.quantity)
            else:
                item = command.to_line_item()

            draft.add_item(item)
            customer_name = await customer_name_of(self.customer_repo, scope.tenant_id, invoice.customer_id)
            saved = await persist_draft(self.invoice_repo, self.invoice_line_repo, invoice, draft)
            await self.uow.commit()

            return Return.ok(build_invoice_response(saved, draft, customer_name))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add item to invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="ADD_INVOICE_ITEM_FAILED",
                    message="Failed to add invoice item",
                    reason=str(e),
                )
            )
