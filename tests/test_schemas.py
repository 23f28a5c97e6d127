import pytest
from pydantic import ValidationError

from app.schemas import MonthSummary, TaskCreate, TransactionCreate
from enums import Currency, Direction
from tests.factories import txn_payload


def test_valid_payload_parses_enums():
    tx = TransactionCreate(**txn_payload(direction="IN", source_currency="HUF", target_currency="AED"))
    assert tx.direction is Direction.IN
    assert tx.source_currency is Currency.HUF
    assert tx.target_currency is Currency.AED


@pytest.mark.parametrize(
    "field, value",
    [
        ("direction", "SIDEWAYS"),
        ("source_currency", "JPY"),
        ("target_currency", "usd"),
        ("status", "PENDING"),
        ("expenditure_category", "FOOD"),
        ("created_on", "2024-1-05"),
        ("created_on", "2024-13-40"),
        ("finished_on", "15/12/2024"),
    ],
)
def test_values_outside_schema_rejected(field, value):
    with pytest.raises(ValidationError):
        TransactionCreate(**txn_payload(**{field: value}))


@pytest.mark.parametrize("field", ["direction", "created_on", "transaction_id", "source_currency", "is_net"])
def test_required_fields_not_nullable(field):
    with pytest.raises(ValidationError):
        TransactionCreate(**txn_payload(**{field: None}))


@pytest.mark.parametrize("field", ["is_net", "exchange_rate", "created_on", "direction"])
def test_required_fields_cannot_be_omitted(field):
    data = txn_payload()
    del data[field]
    with pytest.raises(ValidationError):
        TransactionCreate(**data)


def test_nullable_fields_keep_none_distinct_from_empty():
    tx = TransactionCreate(**txn_payload(source_name="", reference=None, user_id=None, status=None))
    assert tx.source_name == ""
    assert tx.reference is None
    assert tx.user_id is None
    assert tx.status is None


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        TransactionCreate(**txn_payload(colour="blue"))


def test_month_summary_serializes_camel_case():
    summary = MonthSummary(month="2024-12", total_transactions=2, incoming_count=1)
    dumped = summary.model_dump(by_alias=True)
    assert dumped["totalTransactions"] == 2
    assert dumped["incomingCount"] == 1
    assert dumped["neutralCount"] == 0
    assert dumped["totalOutgoing"] == 0.0


def test_task_create_accepts_original_field_names():
    task = TaskCreate(**{"text": "Buy milk", "isCompleted": True})
    assert task.is_completed is True
    with pytest.raises(ValidationError):
        TaskCreate(text="")
