"""PreviewInvoiceTotals Use Case

Recomputes line amounts and totals for an unsaved invoice form.
"""

from libs.result import Result, Return
from src.domain.invoice_draft import InvoiceDraft
from .dtos import PreviewTotalsCommandDTO, InvoicePreviewDTO, LineItemDTO


class PreviewInvoiceTotals:
    """Pure: nothing is read from or written to the store"""

    async def execute(self, command: PreviewTotalsCommandDTO) -> Result[InvoicePreviewDTO]:
        draft = InvoiceDraft(
            items=[item.to_line_item() for item in command.items],
            adjustment=command.adjustment,
            paid_amount=command.paid_amount,
        )
        return Return.ok(
            InvoicePreviewDTO(
                items=[LineItemDTO.from_line_item(item) for item in draft.items],
                totals=draft.totals,
            )
        )
