"""Invoice Line Repository Interface

Defines the contract for invoice line persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_line import InvoiceLine


class InvoiceLineRepository(ABC):
    """
    Repository interface for InvoiceLine persistence

    Lines are only reachable through an invoice that was already loaded
    under the caller's tenant.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items ordered by position
        """
        pass

    @abstractmethod
    async def replace_for_invoice(self, invoice_id: str, lines: List[InvoiceLine]) -> List[InvoiceLine]:
        """
        Delete the invoice's current lines and insert the given ones

        Args:
            invoice_id: Invoice ID
            lines: New lines, already positioned

        Returns:
            Persisted lines
        """
        pass

    @abstractmethod
    async def delete_for_invoice(self, invoice_id: str) -> None:
        """Delete every line of an invoice"""
        pass
