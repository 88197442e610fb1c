"""Identifier Generator

Produces short human readable codes (product SKUs, invoice numbers) made of
a deterministic prefix and a random zero-padded numeric suffix, checked for
uniqueness against the store before being handed out.
"""

import logging
import random
import time
from typing import Awaitable, Callable, Optional
from libs.result import Result, Return, Error
from src.domain.product import ProductType

logger = logging.getLogger(__name__)

ExistsCheck = Callable[[str], Awaitable[bool]]

DEFAULT_MAX_ATTEMPTS = 10
SKU_SUFFIX_WIDTH = 4
INVOICE_NUMBER_SUFFIX_WIDTH = 3
DEFAULT_INVOICE_PREFIX = "INV"


def sku_prefix(name: str, product_type: ProductType) -> str:
    """
    Initials of the name (max 3, uppercased) followed by a type tag

    "Blue steel pipe", product -> "BSP-PRD"
    """
    initials = "".join(word[0].upper() for word in name.split())[:3]
    tag = "PRD" if ProductType(product_type) == ProductType.PRODUCT else "SRV"
    return "-".join(part for part in (initials, tag) if part)


def invoice_number_prefix(prefix: Optional[str] = None, now: Optional[float] = None) -> str:
    """
    Prefix followed by the last 6 digits of the epoch-millisecond clock

    "INV", 1718000123500 ms -> "INV-123500"
    """
    millis = int((time.time() if now is None else now) * 1000)
    return f"{prefix or DEFAULT_INVOICE_PREFIX}-{str(millis)[-6:]}"


class IdentifierGenerator:
    """
    Bounded generate-and-check loop

    Rules:
    - Each attempt draws a fresh random suffix
    - A candidate is returned only after the existence check said it is free
    - After max_attempts collisions the outcome is IDENTIFIER_GENERATION_EXHAUSTED
    - Errors raised by the existence check propagate unchanged
    - Nothing is written; reserving the identifier is up to the caller's insert
    """

    def __init__(
        self,
        exists: ExistsCheck,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.exists = exists
        self.max_attempts = max_attempts
        self.rng = rng or random.SystemRandom()

    def candidate(self, prefix: str, width: int) -> str:
        return f"{prefix}-{self.rng.randrange(10 ** width):0{width}d}"

    async def generate(self, prefix: str, width: int) -> Result[str]:
        """
        Generate an identifier unused at call time

        Args:
            prefix: Deterministic leading part
            width: Number of digits of the random suffix

        Returns:
            Result[str]: the identifier, or IDENTIFIER_GENERATION_EXHAUSTED
        """
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.candidate(prefix, width)
            if not await self.exists(candidate):
                return Return.ok(candidate)
            logger.debug(f"Identifier collision on {candidate} (attempt {attempt}/{self.max_attempts})")

        logger.warning(f"Gave up generating an identifier for prefix {prefix} after {self.max_attempts} attempts")
        return Return.err(
            Error(
                code="IDENTIFIER_GENERATION_EXHAUSTED",
                message="Could not generate a unique identifier. Please try again.",
                reason=f"{self.max_attempts} consecutive collisions for prefix {prefix}",
            )
        )
