"""GetInvoice Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.principal import TenantScope
from .dtos import InvoiceResponseDTO
from .invoice_drafts import build_invoice_response, customer_name_of, invoice_not_found, load_draft


class GetInvoice:
    """
    Use Case: Load an invoice with its items

    Totals in the response are recomputed from the stored lines.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo

    async def execute(self, scope: TenantScope, invoice_id: str) -> Result[InvoiceResponseDTO]:
        try:
            loaded = await load_draft(self.invoice_repo, self.invoice_line_repo, scope.tenant_id, invoice_id)
            if not loaded:
                return Return.err(invoice_not_found(invoice_id))
            invoice, draft = loaded

            customer_name = await customer_name_of(self.customer_repo, scope.tenant_id, invoice.customer_id)
            return Return.ok(build_invoice_response(invoice, draft, customer_name))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to load invoice",
                    reason=str(e),
                )
            )
