"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated
from pydantic import Field
from sqlalchemy import DateTime
from sqlmodel import Column, SQLModel

# Scale of every Numeric column; computed amounts are quantized to it.
AMOUNT_DIGITS = 18
AMOUNT_PLACES = 6
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_PLACES)

# Client-supplied amount or percentage that fits a Numeric column unrounded
AmountInput = Annotated[Decimal, Field(max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)]


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp, the form stored in every *_at column"""
    return datetime.now(timezone.utc)


def timestamp_column() -> Column:
    return Column(DateTime(timezone=True), nullable=False)


def quantize_amount(value: Decimal) -> Decimal:
    return value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


class BaseModel(SQLModel):
    pass
