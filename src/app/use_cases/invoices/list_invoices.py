"""ListInvoices Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.principal import TenantScope
from .dtos import InvoiceSummaryDTO
from .invoice_drafts import build_invoice_summary


class ListInvoices:
    """
    Use Case: List invoice summaries, newest first

    Each row carries the customer name ("Unknown" when the customer is gone)
    and the CREDIT/PAID status derived from the balance.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        scope: TenantScope,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[List[InvoiceSummaryDTO]]:
        try:
            rows = await self.invoice_repo.list_summaries(scope.tenant_id, limit=limit, offset=offset)
            return Return.ok([build_invoice_summary(invoice, name) for invoice, name in rows])

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )
