"""User Settings Domain Entity

Per-tenant profile, business details and invoice numbering preferences.
"""

from datetime import datetime
from typing import Any, Dict
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON
from src.domain.base import BaseModel, generate_uuid, timestamp_column, utc_now


class UserSettings(BaseModel, table=True):
    """
    User Settings - One row per tenant

    Domain Rules:
    - tenant_id is unique
    - business details feed the seller block of exported invoices
    - invoice_settings.prefix replaces the default invoice number prefix
    """

    __tablename__ = "user_settings"
    __table_args__ = (
        Index("ix_user_settings_tenant_id", "tenant_id", unique=True),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str = Field(description="Owning tenant")
    user_id: str = Field(description="Principal that created the settings")

    profile: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    business: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    invoice_settings: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=timestamp_column())

    @property
    def invoice_prefix(self):
        return (self.invoice_settings or {}).get("prefix") or None
