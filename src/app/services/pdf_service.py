"""Invoice Document Export Interface

Defines the contract for rendering a computed invoice to a document.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


@dataclass(frozen=True)
class CompanyDetails:
    """Seller block printed on the invoice"""
    company_name: str = "Your Company"
    address: str = "Your Address"
    phone_number: str = "Your Phone"
    email: str = "your.email@example.com"
    website: str = "www.example.com"
    tax_id: str = "Your Tax ID"


class PdfService(ABC):
    """
    Service interface for invoice document rendering

    Implementations only read the invoice; they never compute or change
    amounts.
    """

    @abstractmethod
    def render_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        company: CompanyDetails,
    ) -> bytes:
        """
        Render a tax invoice

        Args:
            invoice: Invoice with its persisted totals
            invoice_lines: Line items in display order
            customer: Billed customer, None if it was deleted
            company: Seller details

        Returns:
            PDF document as bytes
        """
        pass
