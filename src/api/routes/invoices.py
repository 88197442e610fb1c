"""Invoice API Routes

FastAPI routes for invoices: save, list, search, line item edits, totals
preview, number suggestion and PDF export.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_line_repository import SqlAlchemyInvoiceLineRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.repositories.user_settings_repository import SqlAlchemyUserSettingsRepository
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.use_cases.invoices import (
    AddInvoiceItem,
    DeleteInvoice,
    ExportInvoicePdf,
    GenerateInvoiceNumber,
    GetInvoice,
    InvoiceNumberIssuer,
    ListInvoices,
    PreviewInvoiceTotals,
    RemoveInvoiceItem,
    ReplaceInvoiceItem,
    SaveInvoice,
    SearchInvoices,
    UpdateInvoiceAdjustments,
    AddInvoiceItemCommandDTO,
    InvoiceNumberDTO,
    InvoicePreviewDTO,
    InvoiceResponseDTO,
    InvoiceSummaryDTO,
    PreviewTotalsCommandDTO,
    ReplaceInvoiceItemCommandDTO,
    SaveInvoiceCommandDTO,
    UpdateAdjustmentsCommandDTO,
)
from src.depends import get_session, get_tenant_scope
from src.domain.principal import TenantScope

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice 6c1f7a3e-3a51-4a53-9d0e-4d8c2b1f9e10 not found"
                    }
                }
            }
        }
    }
}


def _number_issuer(session: AsyncSession) -> InvoiceNumberIssuer:
    return InvoiceNumberIssuer(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyUserSettingsRepository(session),
        max_attempts=ApplicationConfig.IDENTIFIER_MAX_ATTEMPTS,
        default_prefix=ApplicationConfig.DEFAULT_INVOICE_PREFIX,
    )


async def _save(scope: TenantScope, command: SaveInvoiceCommandDTO, session: AsyncSession):
    use_case = SaveInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
        _number_issuer(session),
        due_days=ApplicationConfig.DEFAULT_DUE_DAYS,
        default_terms=ApplicationConfig.DEFAULT_TERMS,
    )
    result = await use_case.execute(scope, command)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("", response_model=List[InvoiceSummaryDTO])
async def list_invoices(
    q: Optional[str] = Query(default=None, description="Search invoice or order number"),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    List invoice summaries, newest first.

    Each row has the customer name ("Unknown" when the customer no longer
    exists), total, balance and status (`CREDIT` while a balance is due,
    otherwise `PAID`).
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    if q is not None:
        use_case = SearchInvoices(
            invoice_repo,
            SqlAlchemyCustomerRepository(session),
            limit=ApplicationConfig.SEARCH_RESULT_LIMIT,
        )
        result = await use_case.execute(scope, q)
    else:
        result = await ListInvoices(invoice_repo).execute(scope, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/next-number", response_model=InvoiceNumberDTO)
async def next_invoice_number(
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Suggest an unused invoice number such as `INV-123456-042`.

    The prefix comes from the caller's invoice settings. The number is not
    reserved; saving checks it again.
    """
    result = await GenerateInvoiceNumber(_number_issuer(session)).execute(scope)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/preview", response_model=InvoicePreviewDTO)
async def preview_invoice_totals(
    request: PreviewTotalsCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
):
    """
    Recompute line amounts and totals for an unsaved invoice form.
    """
    result = await PreviewInvoiceTotals().execute(request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Invoice number already used or no free number found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NUMBER_TAKEN",
                            "message": "Invoice number INV-123456-042 is already in use"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: SaveInvoiceCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice.

    Line amounts and totals are computed by the server:
    - amount = quantity x rate x (1 + (cgst% + sgst%) / 100) - discount
    - total = subtotal + CGST + SGST - discount + adjustment
    - balance = total - paid amount

    Leave `invoice_number` empty to have one generated. `invoice_date`
    defaults to today and `due_date` to 30 days later.
    """
    return await _save(scope, request.model_copy(update={"invoice_id": None}), session)


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def get_invoice(
    invoice_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(scope, invoice_id)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("/{invoice_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_invoice(
    invoice_id: str,
    request: SaveInvoiceCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Overwrite an invoice header and replace all of its items.
    """
    return await _save(scope, request.model_copy(update={"invoice_id": invoice_id}), session)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE)
async def delete_invoice(
    invoice_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    result = await DeleteInvoice(uow, SqlAlchemyInvoiceRepository(session)).execute(scope, invoice_id)

    if result.is_err():
        raise ClientError(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{invoice_id}/items",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND_RESPONSE,
)
async def add_invoice_item(
    invoice_id: str,
    request: AddInvoiceItemCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Append an item, either from a catalog product (`product_id`, `quantity`)
    or from explicit fields.
    """
    use_case = AddInvoiceItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyProductRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(scope, invoice_id, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("/{invoice_id}/items/{item_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def replace_invoice_item(
    invoice_id: str,
    item_id: str,
    request: ReplaceInvoiceItemCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    use_case = ReplaceInvoiceItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(scope, invoice_id, item_id, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.delete("/{invoice_id}/items/{item_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def remove_invoice_item(
    invoice_id: str,
    item_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    use_case = RemoveInvoiceItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(scope, invoice_id, item_id)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.patch("/{invoice_id}/adjustments", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_invoice_adjustments(
    invoice_id: str,
    request: UpdateAdjustmentsCommandDTO,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    use_case = UpdateInvoiceAdjustments(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
    )
    result = await use_case.execute(scope, invoice_id, request)

    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get(
    "/{invoice_id}/pdf",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "Invoice PDF"},
        **NOT_FOUND_RESPONSE,
    },
)
async def export_invoice_pdf(
    invoice_id: str,
    scope: TenantScope = Depends(get_tenant_scope),
    session: AsyncSession = Depends(get_session),
):
    """
    Download the invoice as a PDF tax invoice.

    The seller block uses the business details from settings, with
    placeholder values when none are saved.
    """
    use_case = ExportInvoicePdf(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyUserSettingsRepository(session),
        ReportLabPdfService(),
    )
    result = await use_case.execute(scope, invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return Response(
        content=result.value.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result.value.filename}"'},
    )
