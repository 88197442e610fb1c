"""ExportInvoicePdf Use Case

Renders a saved invoice as a PDF tax invoice.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.user_settings_repository import UserSettingsRepository
from src.app.services.pdf_service import CompanyDetails, PdfService
from src.domain.principal import TenantScope
from src.domain.user_settings import UserSettings
from .dtos import InvoicePdfDTO
from .invoice_drafts import invoice_not_found

logger = logging.getLogger(__name__)


def company_details_from_settings(settings: UserSettings) -> CompanyDetails:
    """Seller block from the business settings; missing values keep the placeholders"""
    defaults = CompanyDetails()
    business = (settings.business if settings else None) or {}
    return CompanyDetails(
        company_name=business.get("business_name") or defaults.company_name,
        address=business.get("address") or defaults.address,
        phone_number=business.get("phone") or defaults.phone_number,
        email=business.get("email") or defaults.email,
        website=business.get("website") or defaults.website,
        tax_id=business.get("gst") or defaults.tax_id,
    )


class ExportInvoicePdf:
    """
    Use Case: Export invoice PDF

    Flow:
    1. Retrieve invoice and its lines
    2. Retrieve customer and the tenant's business settings
    3. Render PDF using PDF service
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        settings_repo: UserSettingsRepository,
        pdf_service: PdfService,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.settings_repo = settings_repo
        self.pdf_service = pdf_service

    async def execute(self, scope: TenantScope, invoice_id: str) -> Result[InvoicePdfDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(scope.tenant_id, invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))

            invoice_lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
            customer = await self.customer_repo.get_by_id(scope.tenant_id, invoice.customer_id)
            settings = await self.settings_repo.get_by_tenant(scope.tenant_id)

            pdf_bytes = self.pdf_service.render_invoice(
                invoice=invoice,
                invoice_lines=invoice_lines,
                customer=customer,
                company=company_details_from_settings(settings),
            )

            return Return.ok(
                InvoicePdfDTO(
                    invoice_number=invoice.invoice_number,
                    filename=f"invoice-{invoice.invoice_number}.pdf",
                    content=pdf_bytes,
                )
            )

        except Exception as e:
            logger.error(f"Failed to export invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="EXPORT_INVOICE_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )
