from tracker.charts import (
    BAR_COLOR,
    PIE_COLORS,
    SPENT_COLOR,
    budget_bar_chart,
    category_pie_chart,
    monthly_bar_chart,
)
from tracker.domain import BudgetRow


def test_monthly_bar_chart():
    fig = monthly_bar_chart({"Jan": 150, "Feb": 30}, height=300)
    assert len(fig.data) == 1
    bar = fig.data[0]
    assert bar.type == "bar"
    assert list(bar.x) == ["Jan", "Feb"]
    assert list(bar.y) == [150, 30]
    assert bar.marker.color == BAR_COLOR
    assert fig.layout.height == 300


def test_category_pie_chart_cycles_colours():
    totals = {f"c{i}": i + 1 for i in range(7)}
    fig = category_pie_chart(totals)
    pie = fig.data[0]
    assert pie.type == "pie"
    assert list(pie.labels) == list(totals)
    assert list(pie.marker.colors) == PIE_COLORS + PIE_COLORS[:2]
    assert fig.layout.showlegend is True


def test_budget_bar_chart_groups_two_series():
    rows = (BudgetRow("Rent", 200, 30), BudgetRow("Food", 100, 150))
    fig = budget_bar_chart(rows)
    assert [t.name for t in fig.data] == ["Budgeted", "Spent"]
    assert list(fig.data[0].y) == [200, 100]
    assert list(fig.data[1].y) == [30, 150]
    assert fig.data[1].marker.color == SPENT_COLOR
    assert fig.layout.barmode == "group"


def test_empty_charts():
    for fig in (monthly_bar_chart({}), category_pie_chart({}), budget_bar_chart(())):
        assert len(fig.data) == 0
        assert fig.layout.title.text == "No data to display"
        assert fig.layout.height == 250
