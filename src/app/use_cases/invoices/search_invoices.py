"""SearchInvoices Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.principal import TenantScope
from .dtos import InvoiceSummaryDTO
from .invoice_drafts import build_invoice_summary


class SearchInvoices:
    """
    Use Case: Case-insensitive substring search over invoice and order number
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        customer_repo: CustomerRepository,
        limit: int = 10,
    ):
        self.invoice_repo = invoice_repo
        self.customer_repo = customer_repo
        self.limit = limit

    async def execute(self, scope: TenantScope, query: str) -> Result[List[InvoiceSummaryDTO]]:
        query = (query or "").strip()
        if not query:
            return Return.ok([])

        try:
            invoices = await self.invoice_repo.search(scope.tenant_id, query, limit=self.limit)
            names = {}
            for invoice in invoices:
                if invoice.customer_id not in names:
                    customer = await self.customer_repo.get_by_id(scope.tenant_id, invoice.customer_id)
                    names[invoice.customer_id] = customer.customer_name if customer else None
            return Return.ok([build_invoice_summary(i, names[i.customer_id]) for i in invoices])

        except Exception as e:
            return Return.err(
                Error(
                    code="SEARCH_INVOICES_FAILED",
                    message="Failed to search invoices",
                    reason=str(e),
                )
            )
