import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping, Optional

DIRECTIONS = ("credit", "debit")


def is_positive_amount(value: Any) -> bool:
    # bool is a Real subclass; True must not count as 1 rupee.
    # Decimal is not Real and is rejected: it can't be summed with floats.
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


@dataclass(frozen=True)
class Transaction:
    # ---------------- KEY FIELDS ----------------
    id: Optional[str]
    direction: str              # "credit" | "debit"
    amount: float
    counterparty: Any           # the record's "to"
    category: Any

    # ---------------- INFORMATIONAL ----------------
    date: Optional[str] = None

    def __post_init__(self):
        if not is_positive_amount(self.amount):
            raise ValueError("Amount must be a positive number")
        if self.direction not in DIRECTIONS:
            raise ValueError("Invalid direction")
        # both are used as grouping keys
        if not is_hashable(self.counterparty):
            raise ValueError("Counterparty must be a plain value")
        if not is_hashable(self.category):
            raise ValueError("Category must be a plain value")

    @classmethod
    def from_record(cls, record: Mapping) -> "Transaction":
        """
        Build from a raw UPI log record:
          { id, type, amount, to, category, date }
        The type is matched case-insensitively and stored lower case.
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"expected a mapping, got {type(record).__name__}")

        kind = record.get("type")
        if not isinstance(kind, str):
            raise ValueError("Invalid direction")

        return cls(
            id=record.get("id"),
            direction=kind.lower(),
            amount=record.get("amount"),
            counterparty=record.get("to"),
            category=record.get("category"),
            date=record.get("date"),
        )
