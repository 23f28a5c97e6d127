# models.py
# Role: SQLAlchemy ORM models for the ledger domain.
#       Transaction is one financial ledger entry as delivered by the upstream
#       financial system; Task is the standalone to-do item from the first prototype.

import time

from sqlalchemy import Boolean, Column, Enum, Float, Integer, String, Text

from db import Base
from enums import Currency, Direction, ExpenditureCategory, TransactionStatus


def _now_ms() -> float:
    return time.time() * 1000.0


def _enum_column(enum_cls, nullable: bool = False) -> Column:
    # Stored as plain strings; unknown values are rejected at flush time.
    return Column(
        Enum(enum_cls, native_enum=False, validate_strings=True, length=16),
        nullable=nullable,
    )


class Transaction(Base):
    """
    ORM model representing a single financial ledger entry.

    `record_id` and `creation_time` are assigned by storage; `id` and
    `transaction_id` come from the originating financial system and are kept
    as-is. Amounts are stored both in their own currencies and normalized to
    the default reporting currency (conversion happens upstream).
    """

    __tablename__ = "transactions"

    # Storage identity (insertion order)
    record_id = Column(Integer, primary_key=True, autoincrement=True)
    creation_time = Column(Float, nullable=False, default=_now_ms)

    # Identifiers from the originating system
    id = Column(Float, nullable=False)
    transaction_id = Column(String, nullable=False)

    # Full timestamps
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    # Dates as zero-padded "YYYY-MM-DD" strings; created_on drives month bucketing
    created_on = Column(String(10), nullable=False, index=True)
    finished_on = Column(String(10), nullable=False)

    direction = _enum_column(Direction)
    exchange_rate = Column(Float, nullable=False)

    source_amount = Column(Float, nullable=False)
    source_amount_in_default_currency = Column(Float, nullable=False)
    source_currency = _enum_column(Currency)
    source_name = Column(String, nullable=True)

    target_amount = Column(Float, nullable=False)
    target_amount_in_default_currency = Column(Float, nullable=False)
    target_currency = _enum_column(Currency)
    target_name = Column(String, nullable=True)

    status = _enum_column(TransactionStatus, nullable=True)
    expenditure_category = _enum_column(ExpenditureCategory, nullable=True)

    # Owner; NULL while not yet attributed to a user
    user_id = Column(Float, nullable=True, index=True)

    reference = Column(Text, nullable=True)

    # Opaque flag from upstream, passed through unchanged
    is_net = Column(Float, nullable=False)


class Task(Base):
    """A free-text to-do item with a completion flag."""

    __tablename__ = "tasks"

    record_id = Column(Integer, primary_key=True, autoincrement=True)
    creation_time = Column(Float, nullable=False, default=_now_ms)

    text = Column(String, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)
