# app/routes_dashboard.py

from typing import List, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from .auth import AuthSession, get_session
from .deps import get_db, templates
from .services.transaction_queries import (
    get_available_months,
    get_month_summary,
    list_transactions_by_month,
    list_transactions_by_month_and_direction,
)
from enums import Direction

router = APIRouter()

# Tabs shown above the table; anything else in the URL falls back to ALL
FILTERS = ("ALL", "IN", "OUT")


def dashboard_url(month: str, filter_: str) -> str:
    return "/dashboard?" + urlencode({"month": month, "filter": filter_})


def neighbour_months(available_months: List[str], month: str) -> tuple[Optional[str], Optional[str]]:
    """
    (previous, next) relative to `month` in the latest-first list.
    Previous is the older month, next the newer one; None at either end.
    """
    try:
        idx = available_months.index(month)
    except ValueError:
        idx = -1

    prev_month = available_months[idx + 1] if idx < len(available_months) - 1 else None
    next_month = available_months[idx - 1] if idx > 0 else None
    return prev_month, next_month


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    month: str = Query(""),
    filter: str = Query("ALL"),
    db: Session = Depends(get_db),
    session: AuthSession = Depends(get_session),
):
    filter_ = filter if filter in FILTERS else "ALL"

    if not session.signed_in:
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {"signed_in": False, "month": month, "active_filter": filter_},
        )

    available_months = get_available_months(db)

    # No month in the URL yet: jump to the most recent one that has data
    if not month and available_months:
        return RedirectResponse(url=dashboard_url(available_months[0], filter_), status_code=302)

    summary = None
    transactions = []
    prev_month = next_month = None

    if month:
        summary = get_month_summary(db, month)
        if filter_ == "ALL":
            transactions = list_transactions_by_month(db, month)
        else:
            transactions = list_transactions_by_month_and_direction(db, month, Direction(filter_))
        prev_month, next_month = neighbour_months(available_months, month)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "signed_in": True,
            "subject": session.subject,
            "month": month,
            "active_filter": filter_,
            "filters": FILTERS,
            "available_months": available_months,
            "summary": summary,
            "transactions": transactions,
            "prev_url": dashboard_url(prev_month, filter_) if prev_month else None,
            "next_url": dashboard_url(next_month, filter_) if next_month else None,
            "filter_urls": {f: dashboard_url(month, f) for f in FILTERS},
        },
    )
