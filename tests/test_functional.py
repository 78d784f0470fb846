import pytest

from tracker.domain import BudgetRow
from tracker.functional import Left, Nothing, Right, Some, check_budget


def test_maybe_get_or_else():
    assert Some(5).get_or_else(0) == 5
    assert Some(None).get_or_else(0) is None
    assert Nothing().get_or_else(0) == 0
    assert Some(5) == Some(5)
    assert Some(5) != Nothing()


def test_either_map_and_bind():
    def half(x: int):
        if x % 2:
            return Left("odd")
        return Right(x // 2)

    assert Right(8).bind(half).map(lambda x: x + 1) == Right(5)
    assert Right(3).bind(half).is_left()
    assert Right(3).bind(half).get_error() == "odd"
    assert Left("boom").map(lambda x: x * 2).get_or_else(0) == 0


def test_right_has_no_error():
    with pytest.raises(ValueError):
        Right(1).get_error()


def test_check_budget_within_limit():
    row = BudgetRow("Rent", budgeted=200, spent=200)
    assert check_budget(row) == Right(row)


def test_check_budget_exceeded():
    result = check_budget(BudgetRow("Food", budgeted=100, spent=150))
    assert result.is_left()
    error = result.get_error()
    assert error["error"] == "budget_exceeded"
    assert error["over_budget"] == 50
    assert error["limit"] == 100
