"""Invoice number issuing for a tenant"""

import random
import time
from typing import Callable, Optional
from libs.result import Result
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.user_settings_repository import UserSettingsRepository
from src.app.services.identifier_generator import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_INVOICE_PREFIX,
    INVOICE_NUMBER_SUFFIX_WIDTH,
    IdentifierGenerator,
    invoice_number_prefix,
)


class InvoiceNumberIssuer:
    """
    Proposes invoice numbers unused within a tenant

    The prefix comes from the tenant's invoice settings, falling back to INV.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        settings_repo: UserSettingsRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        default_prefix: str = DEFAULT_INVOICE_PREFIX,
    ):
        self.invoice_repo = invoice_repo
        self.settings_repo = settings_repo
        self.max_attempts = max_attempts
        self.rng = rng
        self.clock = clock
        self.default_prefix = default_prefix

    async def next_number(self, tenant_id: str) -> Result[str]:
        settings = await self.settings_repo.get_by_tenant(tenant_id)
        configured = settings.invoice_prefix if settings else None
        prefix = invoice_number_prefix(configured or self.default_prefix, now=self.clock())

        async def exists(candidate: str) -> bool:
            return await self.invoice_repo.invoice_number_exists(tenant_id, candidate)

        generator = IdentifierGenerator(exists, max_attempts=self.max_attempts, rng=self.rng)
        return await generator.generate(prefix, INVOICE_NUMBER_SUFFIX_WIDTH)
