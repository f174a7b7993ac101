from datetime import date
from types import SimpleNamespace

from backend.app.utils.aggregation import sales_cutoff, stock_by_branch


def _stock(product_id, branch_id, quantity):
    return SimpleNamespace(product_id=product_id, branch_id=branch_id, quantity=quantity)


def test_stock_by_branch_join():
    result = stock_by_branch(["p1", "p2"], [_stock("p1", "b1", 5)])
    assert result == {"p1": {"b1": 5}, "p2": {}}


def test_stock_by_branch_drops_orphans():
    result = stock_by_branch(["p1"], [_stock("p9", "b1", 1), _stock("p1", "b2", 0)])
    assert result == {"p1": {"b2": 0}}


def test_sales_cutoff():
    assert sales_cutoff(date(2024, 6, 15), 30) == "2024-05-16"
    assert sales_cutoff(date(2024, 3, 1), 1) == "2024-02-29"


def test_sales_cutoff_clamps_to_first_day():
    assert sales_cutoff(date(2024, 6, 15), 1_000_000) == "0001-01-01"
    assert sales_cutoff(date(2024, 6, 15), 10**12) == "0001-01-01"
