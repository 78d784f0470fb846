from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Transaction:
    id: int            # millisecond clock reading at creation
    description: str
    amount: float      # signed
    date: date
    category: str


# One bar group of the budget chart
@dataclass(frozen=True)
class BudgetRow:
    category: str
    budgeted: float
    spent: float

    def as_record(self) -> dict:
        return {"category": self.category, "Budgeted": self.budgeted, "Spent": self.spent}
