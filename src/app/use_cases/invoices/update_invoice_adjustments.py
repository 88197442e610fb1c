"""UpdateInvoiceAdjustments Use Case

Changes the manual adjustment and/or paid amount of a saved invoice.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.principal import TenantScope
from .dtos import UpdateAdjustmentsCommandDTO, InvoiceResponseDTO
from .invoice_drafts import (
    build_invoice_response,
    customer_name_of,
    invoice_not_found,
    load_draft,
    persist_draft,
)

logger = logging.getLogger(__name__)


class UpdateInvoiceAdjustments:
    """
    Use Case: Update adjustment / paid amount

    Business Rules:
    1. The adjustment is signed; the paid amount is non-negative
    2. Total, balance and status are recomputed; a paid amount above the
       total leaves a negative balance and status PAID
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
        command: UpdateAdjustmentsCommandDTO,
    ) -> Result[InvoiceResponseDTO]:
        try:
            loaded = await load_draft(self.invoice_repo, self.invoice_line_repo, scope.tenant_id, invoice_id)
            if not loaded:
                return Return.err(invoice_not_found(invoice_id))
            invoice, draft = loaded

            if command.adjustment is not None:
                draft.set_adjustment(command.adjustment)
            if command.paid_amount is not None:
                draft.set_paid_amount(command.paid_amount)

            customer_name = await customer_name_of(self.customer_repo, scope.tenant_id, invoice.customer_id)
            saved = await persist_draft(self.invoice_repo, self.invoice_line_repo, invoice, draft)
            await self.uow.commit()

            return Return.ok(build_invoice_response(saved, draft, customer_name))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update adjustments of invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_ADJUSTMENTS_FAILED",
                    message="Failed to update invoice amounts",
                    reason=str(e),
                )
            )
