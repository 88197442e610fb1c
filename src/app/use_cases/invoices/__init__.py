"""Invoice use cases"""
from .save_invoice import SaveInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .search_invoices import SearchInvoices
from .delete_invoice import DeleteInvoice
from .generate_invoice_number import GenerateInvoiceNumber
from .preview_invoice_totals import PreviewInvoiceTotals
from .add_invoice_item import AddInvoiceItem
from .replace_invoice_item import ReplaceInvoiceItem
from .remove_invoice_item import RemoveInvoiceItem
from .update_invoice_adjustments import UpdateInvoiceAdjustments
from .export_invoice_pdf import ExportInvoicePdf
from .invoice_numbers import InvoiceNumberIssuer
from .dtos import (
    LineItemInputDTO,
    SaveInvoiceCommandDTO,
    PreviewTotalsCommandDTO,
    AddInvoiceItemCommandDTO,
    ReplaceInvoiceItemCommandDTO,
    UpdateAdjustmentsCommandDTO,
    LineItemDTO,
    InvoicePreviewDTO,
    InvoiceResponseDTO,
    InvoiceSummaryDTO,
    InvoiceNumberDTO,
    InvoicePdfDTO,
)

__all__ = [
    "SaveInvoice",
    "GetInvoice",
    "ListInvoices",
    "SearchInvoices",
    "DeleteInvoice",
    "GenerateInvoiceNumber",
    "PreviewInvoiceTotals",
    "AddInvoiceItem",
    "ReplaceInvoiceItem",
    "RemoveInvoiceItem",
    "UpdateInvoiceAdjustments",
    "ExportInvoicePdf",
    "InvoiceNumberIssuer",
    "LineItemInputDTO",
    "SaveInvoiceCommandDTO",
    "PreviewTotalsCommandDTO",
    "AddInvoiceItemCommandDTO",
    "ReplaceInvoiceItemCommandDTO",
    "UpdateAdjustmentsCommandDTO",
    "LineItemDTO",
    "InvoicePreviewDTO",
    "InvoiceResponseDTO",
    "InvoiceSummaryDTO",
    "InvoiceNumberDTO",
    "InvoicePdfDTO",
]
