import time
from functools import reduce
from typing import Dict, Mapping, Optional, Tuple

from tracker.domain import Transaction


def new_transaction_id(trans: Tuple[Transaction, ...], now_ms: Optional[int] = None) -> int:
    """Return a millisecond clock reading, bumped past every id already in use."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    latest = max((t.id for t in trans), default=0)
    return max(now_ms, latest + 1)


def add_transaction(
    trans: Tuple[Transaction, ...], t: Transaction
) -> Tuple[Transaction, ...]:
    return trans + (t,)


def delete_transaction(
    trans: Tuple[Transaction, ...], tx_id: int
) -> Tuple[Transaction, ...]:
    return tuple(filter(lambda t: t.id != tx_id, trans))


def set_budget(
    budgets: Mapping[str, float], category: str, amount: float
) -> Dict[str, float]:
    return {**budgets, category: amount}


def total_expenses(trans: Tuple[Transaction, ...]) -> float:
    return reduce(lambda acc, t: acc + t.amount, trans, 0)


def recent_descriptions(trans: Tuple[Transaction, ...], count: int) -> Tuple[str, ...]:
    if count <= 0:
        return ()
    return tuple(map(lambda t: t.description, trans[-count:]))
