"""
Aggregation helpers used by the read API.
"""
from datetime import date, timedelta
from typing import Iterable


def stock_by_branch(product_ids: Iterable[str], stocks: Iterable) -> dict[str, dict[str, int]]:
    """
    Map every product id to {branch_id: quantity} from the given stock rows.

    Products without stock get an empty mapping. Stock rows for products not
    in product_ids are dropped.
    """
    result: dict[str, dict[str, int]] = {pid: {} for pid in product_ids}
    for s in stocks:
        branches = result.get(s.product_id)
        if branches is not None:
            branches[s.branch_id] = s.quantity
    return result


def sales_cutoff(today: date, days: int) -> str:
    """First calendar day (inclusive) of the window, as 'YYYY-MM-DD'.

    Windows reaching past year 1 start at date.min.
    """
    try:
        return (today - timedelta(days=days)).isoformat()
    except OverflowError:
        return date.min.isoformat()
