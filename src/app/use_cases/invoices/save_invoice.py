"""SaveInvoice Use Case

Inserts a new invoice or overwrites an existing one, header and lines in a
single transaction.
"""

import logging
from datetime import date, timedelta
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice import Invoice
from src.domain.invoice_draft import InvoiceDraft
from src.domain.principal import TenantScope
from .dtos import SaveInvoiceCommandDTO, InvoiceResponseDTO
from .invoice_drafts import build_invoice_response, invoice_not_found, persist_draft
from .invoice_numbers import InvoiceNumberIssuer

logger = logging.getLogger(__name__)

DEFAULT_DUE_DAYS = 30
DEFAULT_TERMS = "Default terms and conditions"


class SaveInvoice:
    """
    Use Case: Save invoice (insert when no id, else update)

    Business Rules:
    1. The customer must exist in the caller's tenant
    2. A blank invoice number is generated for new invoices and kept for
       existing ones; a supplied number already used by another invoice of
       the tenant yields INVOICE_NUMBER_TAKEN
    3. Totals and line amounts are recomputed; client values are ignored
    4. New invoices default invoice_date to today, due_date to 30 days later
       and terms to the default text
    5. Concurrent saves of the same invoice are last-write-wins

    Flow:
    1. Check the customer
    2. Load the existing invoice when updating
    3. Resolve the invoice number
    4. Build the draft (recomputes totals)
    5. Persist header and lines, commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        number_issuer: InvoiceNumberIssuer,
        due_days: int = DEFAULT_DUE_DAYS,
        default_terms: str = DEFAULT_TERMS,
        today=date.today,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.number_issuer = number_issuer
        self.due_days = due_days
        self.default_terms = default_terms
        self.today = today

    async def execute(
        self,
        scope: TenantScope,
        command: SaveInvoiceCommandDTO,
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice save

        Args:
            scope: Resolved tenant scope of the caller
            command: SaveInvoiceCommandDTO with header fields and items

        Returns:
            Result[InvoiceResponseDTO]: Saved invoice with recomputed totals or error
        """
        try:
            # Step 1: Customer must belong to the tenant
            customer = await self.customer_repo.get_by_id(scope.tenant_id, command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer {command.customer_id} not found",
                        reason="Invoices can only be raised against the tenant's own customers",
                    )
                )

            # Step 2: Existing invoice when updating
            existing: Optional[Invoice] = None
            if command.invoice_id:
                existing = await self.invoice_repo.get_by_id(scope.tenant_id, command.invoice_id)
                if not existing:
                    return Return.err(invoice_not_found(command.invoice_id))

            # Step 3: Invoice number
            invoice_number = (command.invoice_number or "").strip()
            if not invoice_number and existing:
                invoice_number = existing.invoice_number
            elif not invoice_number:
                number_result = await self.number_issuer.next_number(scope.tenant_id)
                if number_result.is_err():
                    return Return.err(number_result.error)
                invoice_number = number_result.value
            elif await self.invoice_repo.invoice_number_exists(
                scope.tenant_id,
                invoice_number,
                exclude_invoice_id=existing.id if existing else None,
            ):
                return Return.err(
                    Error(
                        code="INVOICE_NUMBER_TAKEN",
                        message=f"Invoice number {invoice_number} is already in use",
                        reason="Invoice numbers are unique within a tenant",
                    )
                )

            # Step 4: Draft with header defaults
            invoice_date = command.invoice_date or (existing.invoice_date if existing else self.today())
            due_date = command.due_date or (
                existing.due_date if existing else invoice_date + timedelta(days=self.due_days)
            )
            terms = command.terms_and_conditions
            if terms is None:
                terms = existing.terms_and_conditions if existing else self.default_terms

            draft = InvoiceDraft(
                invoice_id=existing.id if existing else None,
                customer_id=customer.id,
                invoice_number=invoice_number,
                order_number=command.order_number,
                invoice_date=invoice_date,
                due_date=due_date,
                terms_and_conditions=terms,
                remarks=command.remarks,
                items=[item.to_line_item() for item in command.items],
                adjustment=command.adjustment,
                paid_amount=command.paid_amount,
            )

            # Step 5: Persist and commit
            invoice = existing or Invoice(tenant_id=scope.tenant_id, user_id=scope.user_id)
            saved = await persist_draft(self.invoice_repo, self.invoice_line_repo, invoice, draft)
            await self.uow.commit()

            logger.info(
                f"Invoice {saved.invoice_number} {'updated' if existing else 'created'} "
                f"for tenant {scope.tenant_id}: total={draft.totals.total} status={draft.totals.status.value}"
            )
            return Return.ok(build_invoice_response(saved, draft, customer.customer_name))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save invoice for tenant {scope.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="SAVE_INVOICE_FAILED",
                    message="Failed to save invoice",
                    reason=str(e),
                )
            )
