"""Tenant settings use cases"""
from .get_settings import GetSettings
from .save_settings import SaveSettings
from .dtos import (
    ProfileDTO,
    BusinessDTO,
    InvoiceSettingsDTO,
    SaveSettingsCommandDTO,
    SettingsResponseDTO,
)

__all__ = [
    "GetSettings",
    "SaveSettings",
    "ProfileDTO",
    "BusinessDTO",
    "InvoiceSettingsDTO",
    "SaveSettingsCommandDTO",
    "SettingsResponseDTO",
]
