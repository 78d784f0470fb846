import logging
from datetime import datetime
from typing import Callable, Dict, List, NamedTuple

from tracker.domain import BudgetRow
from tracker.functional import check_budget

__all__ = [
    'event_bus', 'TRANSACTION_ADDED', 'TRANSACTION_DELETED', 'BUDGET_SET',
    'BUDGET_ALERT', 'Event', 'EventBus', 'register_default_handlers',
]

logger = logging.getLogger(__name__)


class Event(NamedTuple):
    name: str
    ts: str
    payload: dict


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[Event, dict], dict]]] = {}

    def subscribe(self, name: str, handler: Callable[[Event, dict], dict]) -> None:
        if name not in self._subscribers:
            self._subscribers[name] = []
        if handler not in self._subscribers[name]:
            self._subscribers[name].append(handler)

    def publish(self, name: str, payload: dict) -> List[dict]:
        if name not in self._subscribers:
            return []

        event = Event(
            name=name,
            ts=datetime.now().isoformat(timespec="seconds"),
            payload=payload
        )
        logger.debug("publishing %s to %d handler(s)", name, len(self._subscribers[name]))

        results = []
        for handler in self._subscribers[name]:
            handler_name = getattr(handler, "__name__", str(handler))
            try:
                result = handler(event, payload)
            except Exception as e:
                # failures are reported in the results; later handlers still run
                logger.exception("handler %s failed on %s", handler_name, name)
                result = {"error": f"handler_error: {e}", "handler": handler_name}
            results.append(result)
        return results

    def unsubscribe(self, name: str, handler: Callable[[Event, dict], dict]) -> None:
        if name in self._subscribers:
            if handler in self._subscribers[name]:
                self._subscribers[name].remove(handler)


TRANSACTION_ADDED = "TRANSACTION_ADDED"
TRANSACTION_DELETED = "TRANSACTION_DELETED"
BUDGET_SET = "BUDGET_SET"
BUDGET_ALERT = "BUDGET_ALERT"

event_bus = EventBus()


def history_handler(event: Event, payload: dict) -> dict:
    return {"history": {"event": event.name, "timestamp": event.ts, **payload}}


def check_budget_handler(event: Event, payload: dict) -> dict:
    """Alert when the category of a new transaction has gone over its budget.

    Expects ``category``, ``spent`` and ``budget`` in the payload; ``budget``
    is ``None`` for categories nobody has budgeted.
    """
    budget = payload.get("budget")
    if budget is None:
        return {}
    row = BudgetRow(
        category=payload.get("category", ""),
        budgeted=budget,
        spent=payload.get("spent", 0),
    )
    result = check_budget(row)
    if result.is_left():
        error = result.get_error()
        logger.warning("%s: %s / %s", error["message"], error["spent"], error["limit"])
        return {"alert": error["message"], **error}
    return {"spent": row.spent}


def register_default_handlers(bus: EventBus = event_bus) -> EventBus:
    for name in (TRANSACTION_ADDED, TRANSACTION_DELETED, BUDGET_SET):
        bus.subscribe(name, history_handler)
    bus.subscribe(TRANSACTION_ADDED, check_budget_handler)
    return bus


register_default_handlers()
