"""Loading and persisting InvoiceDraft aggregates

Shared by the use cases that edit a saved invoice.
"""

from typing import Optional, Tuple
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice import Invoice
from src.domain.invoice_draft import InvoiceDraft
from libs.result import Error
from .dtos import InvoiceResponseDTO, InvoiceSummaryDTO, LineItemDTO

UNKNOWN_CUSTOMER = "Unknown"


def invoice_not_found(invoice_id: str) -> Error:
    return Error(
        code="INVOICE_NOT_FOUND",
        message=f"Invoice {invoice_id} not found",
        reason="Invoice does not exist in this tenant",
    )


async def load_draft(
    invoice_repo: InvoiceRepository,
    invoice_line_repo: InvoiceLineRepository,
    tenant_id: str,
    invoice_id: str,
) -> Optional[Tuple[Invoice, InvoiceDraft]]:
    invoice = await invoice_repo.get_by_id(tenant_id, invoice_id)
    if not invoice:
        return None
    lines = await invoice_line_repo.get_by_invoice_id(invoice.id)
    return invoice, InvoiceDraft.from_invoice(invoice, lines)


async def customer_name_of(
    customer_repo: CustomerRepository,
    tenant_id: str,
    customer_id: str,
) -> Optional[str]:
    customer = await customer_repo.get_by_id(tenant_id, customer_id)
    return customer.customer_name if customer else None


async def persist_draft(
    invoice_repo: InvoiceRepository,
    invoice_line_repo: InvoiceLineRepository,
    invoice: Invoice,
    draft: InvoiceDraft,
) -> Invoice:
    """Write header totals and replace the lines; the caller commits"""
    draft.apply_to(invoice)
    if draft.is_new:
        saved = await invoice_repo.create(invoice)
        draft.invoice_id = saved.id
    else:
        saved = await invoice_repo.update(invoice)
    await invoice_line_repo.replace_for_invoice(saved.id, draft.to_lines(saved.id))
    return saved


def build_invoice_response(
    invoice: Invoice,
    draft: InvoiceDraft,
    customer_name: Optional[str] = None,
) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        id=invoice.id,
        tenant_id=invoice.tenant_id,
        user_id=invoice.user_id,
        customer_id=invoice.customer_id,
        customer_name=customer_name,
        invoice_number=invoice.invoice_number,
        order_number=invoice.order_number,
        invoice_date=invoice.invoice_date,
        due_date=invoice.due_date,
        terms_and_conditions=invoice.terms_and_conditions,
        remarks=invoice.remarks,
        items=[LineItemDTO.from_line_item(item) for item in draft.items],
        totals=draft.totals,
        status=draft.totals.status,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )


def build_invoice_summary(invoice: Invoice, customer_name: Optional[str]) -> InvoiceSummaryDTO:
    return InvoiceSummaryDTO(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        customer_id=invoice.customer_id,
        customer_name=customer_name or UNKNOWN_CUSTOMER,
        invoice_date=invoice.invoice_date,
        due_date=invoice.due_date,
        total=invoice.total,
        balance_amount=invoice.balance_amount,
        status=invoice.status,
    )
