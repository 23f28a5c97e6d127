# app/deps.py
# Role: Shared application-level dependencies and globals.
#       Provides the Jinja2 templates loader (with ledger display filters)
#       and the standard SQLAlchemy database session dependency.

"""
Shared dependencies and globals for the ledger app.
"""

import os
from typing import Generator

from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from db import SessionLocal
from app.services.months import format_month_display

# -------------------------------------------------------------------
# Templates
# -------------------------------------------------------------------

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

# Jinja2 templates loader (used by all HTML-rendering routes)
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def format_money(amount: float, currency) -> str:
    """1234.5, 'USD' -> '1,234.50 USD'"""
    code = getattr(currency, "value", currency)
    return f"{amount:,.2f} {code}"


templates.env.filters["month_display"] = format_month_display
templates.env.filters["money"] = format_money

# -------------------------------------------------------------------
# Database dependency
# -------------------------------------------------------------------

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed.

    Typical usage in routes:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
