"""In-memory state for the page: the transaction sequence and the budget mapping.

Every mutation swaps in a new container instead of editing the old one, so
views derived from an earlier snapshot never change underneath the page.
"""

import logging
from typing import Dict, List, Optional, Tuple

from tracker.aggregations import budget_for, category_totals
from tracker.domain import Transaction
from tracker.events import (
    BUDGET_ALERT,
    BUDGET_SET,
    TRANSACTION_ADDED,
    TRANSACTION_DELETED,
    EventBus,
    event_bus,
)
from tracker.transforms import add_transaction, delete_transaction, set_budget

logger = logging.getLogger(__name__)


class FinanceStore:
    def __init__(self, bus: Optional[EventBus] = None):
        self.bus = bus if bus is not None else event_bus
        self.transactions: Tuple[Transaction, ...] = ()
        self.budgets: Dict[str, float] = {}
        self.history: Tuple[dict, ...] = ()
        self.alerts: Tuple[dict, ...] = ()

    def add_transaction(self, t: Transaction) -> List[dict]:
        self.transactions = add_transaction(self.transactions, t)
        logger.info("added transaction %s (%s, %s)", t.id, t.category, t.amount)

        payload = {
            "id": t.id,
            "amount": t.amount,
            "category": t.category,
            "spent": category_totals(self.transactions).get(t.category, 0.0),
            "budget": budget_for(self.budgets, t.category).get_or_else(None),
        }
        return self._collect(TRANSACTION_ADDED, payload)

    def delete_transaction(self, tx_id: int) -> List[dict]:
        remaining = delete_transaction(self.transactions, tx_id)
        if len(remaining) == len(self.transactions):
            logger.debug("no transaction with id %s, nothing deleted", tx_id)
            return []
        self.transactions = remaining
        logger.info("deleted transaction %s", tx_id)
        return self._collect(TRANSACTION_DELETED, {"id": tx_id})

    def set_budget(self, category: str, amount: float) -> List[dict]:
        self.budgets = set_budget(self.budgets, category, amount)
        logger.info("budget for %s set to %s", category, amount)
        return self._collect(BUDGET_SET, {"category": category, "amount": amount})

    def clear_alerts(self) -> None:
        self.alerts = ()

    def _collect(self, name: str, payload: dict) -> List[dict]:
        results = self.bus.publish(name, payload)
        for result in results:
            if "history" in result:
                self.history = self.history + (result["history"],)
            if "alert" in result:
                alert = {"type": BUDGET_ALERT, "message": result["alert"],
                         "spent": result.get("spent"), "limit": result.get("limit")}
                self.alerts = self.alerts + (alert,)
        return results
