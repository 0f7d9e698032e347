import math
from collections import defaultdict
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, List, Mapping, Optional, Tuple

from desikata import config
from desikata.core.transaction import Transaction
from desikata.logging_setup import get_logger

logger = get_logger(__name__)

_NO_LEADER = object()


@dataclass(frozen=True)
class AnalysisResult:
    total_credit: float
    total_debit: float
    net_balance: float
    transaction_count: int
    avg_transaction: int
    highest_transaction: Mapping
    category_breakdown: Dict[Any, float] = field(default_factory=dict)
    frequent_contact: Any = None
    all_above_100: bool = False
    has_large_transaction: bool = False

    def to_dict(self) -> dict:
        return {
            "totalCredit": self.total_credit,
            "totalDebit": self.total_debit,
            "netBalance": self.net_balance,
            "transactionCount": self.transaction_count,
            "avgTransaction": self.avg_transaction,
            "highestTransaction": dict(self.highest_transaction),
            "categoryBreakdown": dict(self.category_breakdown),
            "frequentContact": self.frequent_contact,
            "allAbove100": self.all_above_100,
            "hasLargeTransaction": self.has_large_transaction,
        }


def round_half_up(value) -> int:
    """Nearest int, halves up. Exact for any non-negative Real amount."""
    return math.floor(Fraction(value) + Fraction(1, 2))


def valid_transactions(records) -> List[Tuple[Mapping, Transaction]]:
    """
    Keep (record, Transaction) pairs for records that parse.
    Bad rows are dropped, never reported.
    """
    kept = []
    for record in records:
        try:
            kept.append((record, Transaction.from_record(record)))
        except (TypeError, ValueError):
            continue

    dropped = len(records) - len(kept)
    if dropped:
        logger.debug("dropped %d invalid transaction record(s)", dropped)

    return kept


def frequent_contact(txns: List[Transaction]):
    """
    Most frequent counterparty.
    The leader only changes when a count strictly beats it, so the first
    contact to reach the top count wins ties.
    """
    counts = defaultdict(int)
    leader = _NO_LEADER

    for txn in txns:
        counts[txn.counterparty] += 1
        if leader is _NO_LEADER or counts[txn.counterparty] > counts[leader]:
            leader = txn.counterparty

    return leader


def category_breakdown(txns: List[Transaction]) -> Dict[Any, float]:
    summary = {}

    for txn in txns:
        summary.setdefault(txn.category, 0)
        summary[txn.category] += txn.amount

    return summary


def analyze_upi_transactions(transactions) -> Optional[AnalysisResult]:
    if not isinstance(transactions, (list, tuple)) or not transactions:
        return None

    pairs = valid_transactions(transactions)
    if not pairs:
        return None

    txns = [txn for _, txn in pairs]

    # ---- totals ----
    total_credit = sum(t.amount for t in txns if t.direction == "credit")
    total_debit = sum(t.amount for t in txns if t.direction == "debit")
    total_amount = sum(t.amount for t in txns)
    count = len(txns)

    # ---- highest (first max wins) ----
    highest = None
    max_amount = 0
    for record, txn in pairs:
        if txn.amount > max_amount:
            max_amount = txn.amount
            highest = record

    # ---- thresholds ----
    ceiling = config.get("upi.small_transaction_ceiling", 100)
    large = config.get("upi.large_transaction_threshold", 5000)

    return AnalysisResult(
        total_credit=total_credit,
        total_debit=total_debit,
        net_balance=total_credit - total_debit,
        transaction_count=count,
        avg_transaction=round_half_up(Fraction(total_amount) / count),
        highest_transaction=highest,
        category_breakdown=category_breakdown(txns),
        frequent_contact=frequent_contact(txns),
        all_above_100=all(t.amount > ceiling for t in txns),
        has_large_transaction=any(t.amount >= large for t in txns),
    )
