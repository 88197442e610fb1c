"""GenerateInvoiceNumber Use Case

Suggests the next invoice number for the invoice form.
"""

import logging
from libs.result import Result, Return, Error
from src.domain.principal import TenantScope
from .dtos import InvoiceNumberDTO
from .invoice_numbers import InvoiceNumberIssuer

logger = logging.getLogger(__name__)


class GenerateInvoiceNumber:
    """
    Use Case: Generate invoice number

    Format: <prefix>-<last 6 digits of epoch ms>-<3 random digits>. The
    number is free at call time but not reserved.
    """

    def __init__(self, number_issuer: InvoiceNumberIssuer):
        self.number_issuer = number_issuer

    async def execute(self, scope: TenantScope) -> Result[InvoiceNumberDTO]:
        try:
            result = await self.number_issuer.next_number(scope.tenant_id)
            if result.is_err():
                return Return.err(result.error)
            return Return.ok(InvoiceNumberDTO(invoice_number=result.value))

        except Exception as e:
            logger.error(f"Failed to generate invoice number for tenant {scope.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_INVOICE_NUMBER_FAILED",
                    message="Failed to generate invoice number",
                    reason=str(e),
                )
            )
