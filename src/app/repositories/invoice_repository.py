"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import abstractmethod
from typing import List, Optional, Tuple
from src.app.repositories.base import TenantScopedRepository
from src.domain.invoice import Invoice


class InvoiceRepository(TenantScopedRepository[Invoice]):
    """
    Repository interface for Invoice persistence

    Searches invoice_number and order_number.
    """

    @abstractmethod
    async def invoice_number_exists(
        self,
        tenant_id: str,
        invoice_number: str,
        exclude_invoice_id: Optional[str] = None,
    ) -> bool:
        """
        Check if an invoice number is already used within the tenant

        Args:
            tenant_id: Tenant identifier
            invoice_number: Candidate number
            exclude_invoice_id: Invoice to ignore (the one being updated)

        Returns:
            True if taken, False otherwise
        """
        pass

    @abstractmethod
    async def list_summaries(
        self,
        tenant_id: str,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Tuple[Invoice, Optional[str]]]:
        """
        List invoices with the billed customer's name, newest first

        Returns:
            (invoice, customer_name) pairs; customer_name is None when the
            customer row no longer exists
        """
        pass
