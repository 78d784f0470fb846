from collections import defaultdict
from typing import Callable, Dict, Iterable, Mapping, Tuple

from tracker.domain import BudgetRow, Transaction
from tracker.functional import Maybe, Nothing, Some


def month_label(t: Transaction) -> str:
    # Locale-dependent short month name; years are not part of the key.
    return t.date.strftime("%b")


def by_category(t: Transaction) -> str:
    return t.category


def group_totals(
    trans: Iterable[Transaction], key: Callable[[Transaction], str]
) -> Dict[str, float]:
    """Sum amounts per derived key, keeping first-appearance order."""
    totals: Dict[str, float] = defaultdict(float)
    for t in trans:
        totals[key(t)] += t.amount
    return dict(totals)


def monthly_totals(trans: Iterable[Transaction]) -> Dict[str, float]:
    return group_totals(trans, month_label)


def category_totals(trans: Iterable[Transaction]) -> Dict[str, float]:
    return group_totals(trans, by_category)


def budget_for(budgets: Mapping[str, float], category: str) -> Maybe[float]:
    if category in budgets:
        return Some(budgets[category])
    return Nothing()


def budget_rows(
    budgets: Mapping[str, float], trans: Iterable[Transaction]
) -> Tuple[BudgetRow, ...]:
    """One row per budgeted category, paired with what was spent in it.

    Categories that have spend but no budget are left out.
    """
    spent = category_totals(trans)
    return tuple(
        BudgetRow(category=cat, budgeted=amount, spent=spent.get(cat, 0.0))
        for cat, amount in budgets.items()
    )


def over_budget(budgets: Mapping[str, float], trans: Iterable[Transaction]) -> Tuple[BudgetRow, ...]:
    return tuple(row for row in budget_rows(budgets, trans) if row.spent > row.budgeted)
