from __future__ import annotations

from itertools import count
from typing import Any, Dict

from app.schemas import TransactionCreate
from app.services.transaction_queries import insert_transaction

_ids = count(1000)


def txn_payload(**overrides: Any) -> Dict[str, Any]:
    """A valid transaction dict; any field can be overridden."""
    n = next(_ids)
    created_on = overrides.get("created_on", "2025-03-14")
    amount = overrides.pop("amount", 100.0)
    data: Dict[str, Any] = {
        "id": float(n),
        "transaction_id": f"tx-{n}",
        "created_at": f"{created_on}T09:30:00Z",
        "updated_at": f"{created_on}T09:30:00Z",
        "created_on": created_on,
        "finished_on": created_on,
        "direction": "OUT",
        "exchange_rate": 1.0,
        "source_amount": amount,
        "source_amount_in_default_currency": amount,
        "source_currency": "EUR",
        "source_name": "Main Account",
        "target_amount": amount,
        "target_amount_in_default_currency": amount,
        "target_currency": "EUR",
        "target_name": "Vendor",
        "status": "COMPLETED",
        "expenditure_category": None,
        "user_id": 7.0,
        "reference": None,
        "is_net": 0,
    }
    data.update(overrides)
    return data


def add_txn(db, **overrides: Any):
    return insert_transaction(db, TransactionCreate(**txn_payload(**overrides)))
