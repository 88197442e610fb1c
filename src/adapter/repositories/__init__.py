from .customer_repository import SqlAlchemyCustomerRepository
from .product_repository import SqlAlchemyProductRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository
from .user_settings_repository import SqlAlchemyUserSettingsRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
    "SqlAlchemyUserSettingsRepository",
]
