from .base import TenantScopedRepository
from .customer_repository import CustomerRepository
from .product_repository import ProductRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository
from .user_settings_repository import UserSettingsRepository

__all__ = [
    "TenantScopedRepository",
    "CustomerRepository",
    "ProductRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
    "UserSettingsRepository",
]
