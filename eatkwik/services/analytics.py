"""
Dashboard analytics.

Aggregates are computed in process from order and menu rows so the same code
runs against any database backend.
"""

from collections import Counter, defaultdict
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

UNCATEGORIZED = "Uncategorized"


def _lines(order) -> List[Dict[str, Any]]:
    return order.items_json or []


def _line_revenue(line: Dict[str, Any]) -> float:
    return (line.get("quantity") or 0) * (line.get("price_at_order") or 0)


def _iso_week(day: date) -> str:
    year, week, _ = day.isocalendar()
    return f"{year}-W{week:02d}"


def daily_sales(orders: Iterable, today: date, days: int = 7) -> List[Dict[str, Any]]:
    """One zero-filled point per day, oldest first, ending today"""
    buckets = {
        (today - timedelta(days=offset)).isoformat(): {"totalSales": 0.0, "orderCount": 0}
        for offset in range(days - 1, -1, -1)
    }
    for order in orders:
        key = order.created_at.date().isoformat()
        if key in buckets:
            buckets[key]["totalSales"] += order.total_amount or 0
            buckets[key]["orderCount"] += 1

    return [
        {"date": key, "totalSales": round(point["totalSales"], 2), "orderCount": point["orderCount"]}
        for key, point in buckets.items()
    ]


def weekly_sales(orders: Iterable, today: date, weeks: int = 4) -> List[Dict[str, Any]]:
    """One zero-filled point per ISO week, oldest first, ending with the current week"""
    buckets = {
        _iso_week(today - timedelta(weeks=offset)): {"totalSales": 0.0, "orderCount": 0}
        for offset in range(weeks - 1, -1, -1)
    }
    for order in orders:
        key = _iso_week(order.created_at.date())
        if key in buckets:
            buckets[key]["totalSales"] += order.total_amount or 0
            buckets[key]["orderCount"] += 1

    return [
        {"date": key, "totalSales": round(point["totalSales"], 2), "orderCount": point["orderCount"]}
        for key, point in buckets.items()
    ]


def peak_ordering_hours(orders: Iterable) -> List[Dict[str, int]]:
    counts = Counter(order.created_at.hour for order in orders)
    return [{"hour": hour, "orderCount": counts[hour]} for hour in sorted(counts)]


def most_ordered_dishes(orders: Iterable, limit: int = 5) -> List[Dict[str, Any]]:
    """Top dishes by quantity sold, grouped by menu item id and name"""
    quantities: Dict[tuple, int] = defaultdict(int)
    revenue: Dict[tuple, float] = defaultdict(float)
    for order in orders:
        for line in _lines(order):
            key = (line.get("menu_item_id"), line.get("name"))
            quantities[key] += line.get("quantity") or 0
            revenue[key] += _line_revenue(line)

    ranked = sorted(quantities, key=lambda key: quantities[key], reverse=True)[:limit]
    return [
        {
            "menuItemId": key[0],
            "itemName": key[1],
            "quantitySold": quantities[key],
            "totalRevenue": round(revenue[key], 2),
        }
        for key in ranked
    ]


def category_revenue(orders: Iterable, menu_items: Iterable) -> List[Dict[str, Any]]:
    """Revenue per catalog category, highest first"""
    categories = {str(item.id): item.category for item in menu_items}
    revenue: Dict[str, float] = defaultdict(float)
    for order in orders:
        for line in _lines(order):
            category = categories.get(str(line.get("menu_item_id")), UNCATEGORIZED)
            revenue[category] += _line_revenue(line)

    return [
        {"categoryName": name, "totalRevenue": round(total, 2)}
        for name, total in sorted(revenue.items(), key=lambda entry: entry[1], reverse=True)
    ]


def build_dashboard(
    orders: List,
    menu_items: Iterable,
    now: Optional[datetime] = None,
    days: int = 7,
    weeks: int = 4,
    limit: int = 5,
) -> Dict[str, Any]:
    """Assemble the full dashboard payload"""
    today = (now or datetime.utcnow()).date()
    return {
        "dailySales": daily_sales(orders, today, days),
        "weeklySales": weekly_sales(orders, today, weeks),
        "peakOrderingHours": peak_ordering_hours(orders),
        "totalOrdersCount": len(orders),
        "mostOrderedDishes": most_ordered_dishes(orders, limit),
        "categoryRevenue": category_revenue(orders, menu_items),
    }
