"""
API schemas

Pydantic models for the write-path gate and the read shapes returned by the
JSON API. Enumerated fields use the closed enums from `enums.py`; nullable
fields are Optional so that None stays distinct from "" and 0.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from enums import Currency, Direction, ExpenditureCategory, TransactionStatus

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class TransactionBase(BaseModel):
    """
    Transaction fields as delivered by the upstream financial system.
    Table name: "transactions"
    """

    id: float = Field(..., description="Numeric id from the originating system")
    transaction_id: str = Field(..., description="String id from the originating system")
    created_at: str = Field(..., description="Full creation timestamp")
    updated_at: str = Field(..., description="Full update timestamp")
    created_on: str = Field(..., pattern=ISO_DATE_PATTERN, description="Booking date, YYYY-MM-DD")
    finished_on: str = Field(..., pattern=ISO_DATE_PATTERN, description="Completion date, YYYY-MM-DD")
    direction: Direction
    exchange_rate: float
    source_amount: float
    source_amount_in_default_currency: float
    source_currency: Currency
    source_name: Optional[str] = None
    target_amount: float
    target_amount_in_default_currency: float
    target_currency: Currency
    target_name: Optional[str] = None
    status: Optional[TransactionStatus] = None
    expenditure_category: Optional[ExpenditureCategory] = None
    user_id: Optional[float] = None
    reference: Optional[str] = None
    is_net: float


class TransactionCreate(TransactionBase):
    """Insert payload. Anything outside the enumerated sets is rejected here."""

    model_config = ConfigDict(extra="forbid")

    @field_validator("created_on", "finished_on")
    @classmethod
    def _must_be_calendar_date(cls, value: str) -> str:
        # Pattern already guarantees the shape; this rejects e.g. 2024-13-40
        date.fromisoformat(value)
        return value


class TransactionRead(TransactionBase):
    model_config = ConfigDict(from_attributes=True)

    record_id: int
    creation_time: float


class MonthSummary(BaseModel):
    """Aggregate counters for one month. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    month: str
    total_transactions: int = 0
    incoming_count: int = 0
    outgoing_count: int = 0
    neutral_count: int = 0
    total_incoming: float = 0.0
    total_outgoing: float = 0.0


class SeedResult(BaseModel):
    inserted: int


class TaskCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    text: str = Field(..., min_length=1)
    is_completed: bool = False


class TaskRead(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    record_id: int
    creation_time: float
    text: str
    is_completed: bool
