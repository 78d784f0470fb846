from typing import Any, Callable, Dict, Mapping, Sequence, Tuple

from tracker.aggregations import budget_rows, category_totals, monthly_totals, over_budget
from tracker.domain import Transaction
from tracker.transforms import recent_descriptions, total_expenses

Calculator = Callable[[Tuple[Transaction, ...], Mapping[str, float], Dict[str, Any]], Dict[str, Any]]


class SummaryService:
    """Facade that derives every view of the page from the two state containers.

    calculators: sequence of functions taking (transactions, budgets, acc) -> dict (partial results).
    ``acc`` holds everything earlier calculators produced, so later ones can reuse it.
    """

    def __init__(self, calculators: Sequence[Calculator]):
        self.calculators = calculators

    def summary(self, transactions: Tuple[Transaction, ...], budgets: Mapping[str, float]) -> Dict[str, Any]:
        report = {"steps": [], "result": {}}
        acc: Dict[str, Any] = {}
        for calc in self.calculators:
            out = calc(transactions, budgets, acc)
            report["steps"].append({"calculator": getattr(calc, "__name__", str(calc)), "output": out})
            acc.update(out)
        report["result"] = acc
        return report


def calc_total(transactions, budgets, acc):
    return {"total_expenses": total_expenses(transactions)}


def calc_monthly(transactions, budgets, acc):
    return {"monthly": monthly_totals(transactions)}


def calc_categories(transactions, budgets, acc):
    return {"categories": category_totals(transactions)}


def calc_budgets(transactions, budgets, acc):
    return {
        "budget_rows": budget_rows(budgets, transactions),
        "over_budget": over_budget(budgets, transactions),
    }


def make_recent_calculator(count: int) -> Calculator:
    def calc_recent(transactions, budgets, acc):
        return {"recent": recent_descriptions(transactions, count)}
    return calc_recent


def default_summary_service(recent_count: int = 3) -> SummaryService:
    return SummaryService(calculators=[
        calc_total,
        make_recent_calculator(recent_count),
        calc_monthly,
        calc_categories,
        calc_budgets,
    ])
