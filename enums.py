# enums.py
# Role: Closed value sets for transaction fields.
#       Shared by the ORM models (column types) and the API schemas (validation).

from enum import Enum


class Currency(str, Enum):
    HUF = "HUF"
    EUR = "EUR"
    USD = "USD"
    DKK = "DKK"
    GBP = "GBP"
    AED = "AED"


class Direction(str, Enum):
    """Cash-flow classification of a transaction."""

    IN = "IN"
    OUT = "OUT"
    NEUTRAL = "NEUTRAL"


class TransactionStatus(str, Enum):
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ExpenditureCategory(str, Enum):
    INFRASTRUCTURE = "INFRASTRUCTURE"
    TAXES = "TAXES"
    MARKETING = "MARKETING"
    LEGAL = "LEGAL"
    OTHER = "OTHER"
