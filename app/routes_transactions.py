# routes_transactions.py
"""
JSON API over the transaction ledger: month listings with optional
direction/user filters, available months, month summary, and the
validated write path (single insert + dev seeding).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

import config
from app.auth import AuthSession, require_session
from app.deps import get_db
from app.logging_setup import get_logger
from app.schemas import MonthSummary, SeedResult, TransactionCreate, TransactionRead
from app.services import transaction_queries
from enums import Direction

logger = get_logger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionRead])
def list_transactions(
    month: str = Query(..., description="Month key, YYYY-MM"),
    direction: Optional[Direction] = Query(None),
    user_id: Optional[float] = Query(None),
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    """
    Transactions booked in `month`, newest first.

    `direction` and `user_id` narrow the listing; both may be combined.
    """
    return transaction_queries.list_transactions(db, month, direction=direction, user_id=user_id)


@router.get("/months", response_model=List[str])
def available_months(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    return transaction_queries.get_available_months(db)


@router.get("/summary", response_model=MonthSummary)
def month_summary(
    month: str = Query(..., description="Month key, YYYY-MM"),
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    return transaction_queries.get_month_summary(db, month)


@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    tx = transaction_queries.insert_transaction(db, payload)
    logger.info(f"Inserted transaction {tx.transaction_id!r} as record #{tx.record_id}")
    return tx


@router.post("/seed", response_model=SeedResult)
def seed_transactions(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_session),
):
    """
    Debug endpoint: insert the sample transactions.
    Only available when ENABLE_SEED is on.
    """
    if not config.ENABLE_SEED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Seeding is disabled")

    inserted = transaction_queries.seed_sample_transactions(db)
    return SeedResult(inserted=inserted)
