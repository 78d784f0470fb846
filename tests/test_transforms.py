from datetime import date

from tracker.domain import Transaction
from tracker.transforms import (
    add_transaction,
    delete_transaction,
    new_transaction_id,
    recent_descriptions,
    set_budget,
    total_expenses,
)


def make_sample():
    return (
        Transaction(1, "Groceries", 100, date(2024, 1, 1), "Food"),
        Transaction(2, "Dinner", 50, date(2024, 1, 15), "Food"),
        Transaction(3, "February rent", 30, date(2024, 2, 1), "Rent"),
    )


def test_add_transaction_returns_new_tuple():
    trans = make_sample()
    t4 = Transaction(4, "Bus", 2.5, date(2024, 2, 3), "Transport")
    new_transactions = add_transaction(trans, t4)

    assert len(new_transactions) == 4
    assert new_transactions[-1] == t4
    assert len(trans) == 3


def test_delete_transaction_keeps_order_of_the_rest():
    trans = make_sample()
    remaining = delete_transaction(trans, 2)
    assert [t.id for t in remaining] == [1, 3]
    assert len(trans) == 3


def test_delete_unknown_id_is_noop():
    trans = make_sample()
    assert delete_transaction(trans, 99) == trans


def test_set_budget_overwrites_and_copies():
    budgets = set_budget({}, "Food", 100)
    updated = set_budget(budgets, "Food", 150)

    assert updated == {"Food": 150}
    assert budgets == {"Food": 100}


def test_set_budget_keeps_insertion_order():
    budgets = set_budget(set_budget({}, "Rent", 200), "Food", 100)
    budgets = set_budget(budgets, "Rent", 250)
    assert list(budgets) == ["Rent", "Food"]


def test_total_expenses():
    trans = make_sample()
    assert total_expenses(trans) == 180
    assert total_expenses(delete_transaction(trans, 1)) == 80
    assert total_expenses(()) == 0


def test_total_expenses_with_signed_amounts():
    trans = (
        Transaction(1, "Refund", -20, date(2024, 3, 1), "Food"),
        Transaction(2, "Lunch", 35.5, date(2024, 3, 2), "Food"),
    )
    assert total_expenses(trans) == 15.5


def test_recent_descriptions():
    trans = make_sample()
    assert recent_descriptions(trans, 2) == ("Dinner", "February rent")
    assert recent_descriptions(trans, 10) == ("Groceries", "Dinner", "February rent")
    assert recent_descriptions(trans, 0) == ()


def test_new_transaction_id_uses_clock():
    assert new_transaction_id((), now_ms=1_700_000_000_000) == 1_700_000_000_000


def test_new_transaction_id_never_repeats():
    trans = make_sample()
    latest = Transaction(5_000, "x", 1, date(2024, 1, 1), "y")
    trans = trans + (latest,)
    assert new_transaction_id(trans, now_ms=5_000) == 5_001
    assert new_transaction_id(trans, now_ms=10) == 5_001


def test_new_transaction_id_defaults_to_wall_clock():
    assert new_transaction_id(()) > 1_600_000_000_000
