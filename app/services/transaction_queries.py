# app/services/transaction_queries.py
"""
Read-side queries over the transactions table.

Every function takes the SQLAlchemy session explicitly and keeps no state
between calls. A malformed month key matches nothing: list queries return
an empty list and the summary comes back zero-filled. Storage errors are
not caught here.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy import case, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from app.logging_setup import get_logger
from app.schemas import MonthSummary, TransactionCreate
from app.services.months import get_month_range
from enums import Currency, Direction, ExpenditureCategory, TransactionStatus
from models import Transaction

logger = get_logger(__name__)


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def _month_query(db: Session, month: str) -> Optional[Query]:
    """
    Base query for [month-01, next-month-01) on created_on, or None
    when the month key is malformed.
    """
    try:
        range_start, range_end_exclusive = get_month_range(month)
    except ValueError:
        logger.warning(f"Ignoring malformed month key {month!r}")
        return None

    return db.query(Transaction).filter(
        Transaction.created_on >= range_start,
        Transaction.created_on < range_end_exclusive,
    )


def _newest_first(query: Query) -> List[Transaction]:
    # record_id grows with every insert, so this is insertion recency
    return query.order_by(Transaction.record_id.desc()).all()


# -------------------------------------------------------------------
# Month listings
# -------------------------------------------------------------------

def list_transactions_by_month(db: Session, month: str) -> List[Transaction]:
    """All transactions booked in `month` ('YYYY-MM'), newest first."""
    query = _month_query(db, month)
    if query is None:
        return []
    return _newest_first(query)


def list_transactions_by_month_and_direction(
    db: Session, month: str, direction: Direction
) -> List[Transaction]:
    query = _month_query(db, month)
    if query is None:
        return []
    return _newest_first(query.filter(Transaction.direction == Direction(direction)))


def list_transactions_by_month_and_user(
    db: Session, month: str, user_id: float
) -> List[Transaction]:
    query = _month_query(db, month)
    if query is None:
        return []
    return _newest_first(query.filter(Transaction.user_id == user_id))


def list_transactions_by_month_direction_and_user(
    db: Session, month: str, direction: Direction, user_id: float
) -> List[Transaction]:
    query = _month_query(db, month)
    if query is None:
        return []
    return _newest_first(
        query.filter(
            Transaction.direction == Direction(direction),
            Transaction.user_id == user_id,
        )
    )


def list_transactions(
    db: Session,
    month: str,
    direction: Optional[Direction] = None,
    user_id: Optional[float] = None,
) -> List[Transaction]:
    """Dispatch to the matching month listing for the given optional filters."""
    if direction is not None and user_id is not None:
        return list_transactions_by_month_direction_and_user(db, month, direction, user_id)
    if direction is not None:
        return list_transactions_by_month_and_direction(db, month, direction)
    if user_id is not None:
        return list_transactions_by_month_and_user(db, month, user_id)
    return list_transactions_by_month(db, month)


# -------------------------------------------------------------------
# Navigation & aggregates
# -------------------------------------------------------------------

def get_available_months(db: Session) -> List[str]:
    """Distinct 'YYYY-MM' keys that have at least one transaction, latest first."""
    month_col = func.substr(Transaction.created_on, 1, 7)
    rows = (
        db.query(month_col.label("month"))
        .distinct()
        .order_by(month_col.desc())
        .all()
    )
    return [row.month for row in rows]


def get_month_summary(db: Session, month: str) -> MonthSummary:
    """
    Counts per direction plus incoming/outgoing totals for one month.

    Incoming uses the target amount in default currency, outgoing the source
    amount; neutral transactions are only counted.
    """
    base = _month_query(db, month)
    if base is None:
        return MonthSummary(month=month)

    is_in = Transaction.direction == Direction.IN
    is_out = Transaction.direction == Direction.OUT

    total, incoming_count, outgoing_count, total_incoming, total_outgoing = (
        base.with_entities(
            func.count(Transaction.record_id),
            func.coalesce(func.sum(case((is_in, 1), else_=0)), 0),
            func.coalesce(func.sum(case((is_out, 1), else_=0)), 0),
            func.coalesce(
                func.sum(case((is_in, Transaction.target_amount_in_default_currency), else_=0.0)),
                0.0,
            ),
            func.coalesce(
                func.sum(case((is_out, Transaction.source_amount_in_default_currency), else_=0.0)),
                0.0,
            ),
        )
        .one()
    )

    total = int(total or 0)
    incoming_count = int(incoming_count)
    outgoing_count = int(outgoing_count)

    return MonthSummary(
        month=month,
        total_transactions=total,
        incoming_count=incoming_count,
        outgoing_count=outgoing_count,
        neutral_count=total - incoming_count - outgoing_count,
        total_incoming=float(total_incoming),
        total_outgoing=float(total_outgoing),
    )


# -------------------------------------------------------------------
# Write path
# -------------------------------------------------------------------

def insert_transaction(db: Session, payload: TransactionCreate) -> Transaction:
    """Persist one already-validated transaction and return the stored row."""
    tx = Transaction(**payload.model_dump())
    db.add(tx)
    db.commit()
    db.refresh(tx)
    return tx


SAMPLE_TRANSACTIONS: List[Dict[str, Any]] = [
    {
        "created_on": "2024-12-15",
        "direction": Direction.IN,
        "amount": 5000.0,
        "source_name": "Acme Corp",
        "target_name": "Main Account",
        "reference": "Invoice #1042",
        "category": None,
    },
    {
        "created_on": "2024-12-10",
        "direction": Direction.OUT,
        "amount": 150.0,
        "source_name": "Main Account",
        "target_name": "Cloud Hosting Ltd",
        "reference": "Monthly hosting",
        "category": ExpenditureCategory.INFRASTRUCTURE,
    },
    {
        "created_on": "2024-11-25",
        "direction": Direction.IN,
        "amount": 2500.0,
        "source_name": "Globex",
        "target_name": "Main Account",
        "reference": "Consulting",
        "category": None,
    },
    {
        "created_on": "2024-11-20",
        "direction": Direction.OUT,
        "amount": 300.0,
        "source_name": "Main Account",
        "target_name": "Ad Network",
        "reference": "Campaign",
        "category": ExpenditureCategory.MARKETING,
    },
    {
        "created_on": "2024-10-30",
        "direction": Direction.OUT,
        "amount": 800.0,
        "source_name": "Main Account",
        "target_name": "Law Office",
        "reference": "Contract review",
        "category": ExpenditureCategory.LEGAL,
    },
]


def build_sample_payload(index: int, sample: Dict[str, Any]) -> TransactionCreate:
    """Expand one compact sample row into a full USD transaction payload."""
    created_on = sample["created_on"]
    amount = float(sample["amount"])
    timestamp = f"{created_on}T10:00:00Z"

    return TransactionCreate(
        id=float(index),
        transaction_id=f"sample-{index}",
        created_at=timestamp,
        updated_at=timestamp,
        created_on=created_on,
        finished_on=created_on,
        direction=sample["direction"],
        exchange_rate=1.0,
        source_amount=amount,
        source_amount_in_default_currency=amount,
        source_currency=Currency.USD,
        source_name=sample["source_name"],
        target_amount=amount,
        target_amount_in_default_currency=amount,
        target_currency=Currency.USD,
        target_name=sample["target_name"],
        status=TransactionStatus.COMPLETED,
        expenditure_category=sample["category"],
        user_id=1.0,
        reference=sample["reference"],
        is_net=0,
    )


def seed_sample_transactions(
    db: Session, samples: Optional[List[Dict[str, Any]]] = None
) -> int:
    """
    Development helper: insert sample transactions one by one.

    Each row is its own commit. A row that fails validation or a constraint
    is rolled back and logged; rows inserted before it stay. Storage errors
    propagate. Returns the number of rows inserted.
    """
    samples = SAMPLE_TRANSACTIONS if samples is None else samples
    inserted = 0

    for i, sample in enumerate(samples, start=1):
        try:
            tx = insert_transaction(db, build_sample_payload(i, sample))
        except (ValidationError, IntegrityError) as e:
            db.rollback()
            logger.error(f"Failed to seed sample #{i}: {e!r}")
            continue
        inserted += 1
        logger.debug(f"Seeded #{i} {tx.created_on} | {tx.direction.value} | {tx.target_amount}")

    logger.info(f"Seeded {inserted}/{len(samples)} sample transactions")
    return inserted
