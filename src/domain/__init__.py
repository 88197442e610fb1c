from .base import BaseModel, generate_uuid, utc_now
from .customer import Customer, CustomerType
from .product import Product, ProductType
from .invoice import Invoice, InvoiceStatus
from .line_item import LineItem, InvalidLineItem
from .invoice_line import InvoiceLine
from .invoice_totals import InvoiceTotals, calculate_totals
from .invoice_draft import InvoiceDraft, LineItemNotFound
from .user_settings import UserSettings
from .principal import (
    Principal,
    AuthSession,
    SessionEvent,
    ScopeSource,
    TenantScope,
    SessionContext,
)

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utc_now",
    "Customer",
    "CustomerType",
    "Product",
    "ProductType",
    "Invoice",
    "InvoiceStatus",
    "LineItem",
    "InvalidLineItem",
    "InvoiceLine",
    "InvoiceTotals",
    "calculate_totals",
    "InvoiceDraft",
    "LineItemNotFound",
    "UserSettings",
    "Principal",
    "AuthSession",
    "SessionEvent",
    "ScopeSource",
    "TenantScope",
    "SessionContext",
]
