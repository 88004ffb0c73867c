"""Tests for dashboard analytics"""

from datetime import datetime
from types import SimpleNamespace

import pytest
from httpx import AsyncClient

from eatkwik.services.analytics import build_dashboard

NOW = datetime(2024, 3, 14, 18, 30)


def make_order(created_at, lines, total=None):
    if total is None:
        total = sum(line["quantity"] * line["price_at_order"] for line in lines)
    return SimpleNamespace(created_at=created_at, items_json=lines, total_amount=total)


def line(menu_item_id, name, quantity, price):
    return {"menu_item_id": menu_item_id, "name": name, "quantity": quantity, "price_at_order": price}


MENU = [
    SimpleNamespace(id="pizza", category="Main Courses"),
    SimpleNamespace(id="lemonade", category="Beverages"),
]

ORDERS = [
    make_order(datetime(2024, 3, 14, 12, 5), [line("pizza", "Pizza", 2, 10.0), line("lemonade", "Lemonade", 1, 3.0)]),
    make_order(datetime(2024, 3, 14, 12, 45), [line("pizza", "Pizza", 1, 10.0)]),
    make_order(datetime(2024, 3, 12, 19, 0), [line("lemonade", "Lemonade", 4, 3.0)]),
    make_order(datetime(2024, 3, 1, 9, 0), [line("retired", "Old Special", 1, 7.5)]),
]


def test_daily_sales_zero_filled_oldest_first():
    dashboard = build_dashboard(ORDERS, MENU, now=NOW)
    daily = dashboard["dailySales"]

    assert [point["date"] for point in daily] == [
        "2024-03-08",
        "2024-03-09",
        "2024-03-10",
        "2024-03-11",
        "2024-03-12",
        "2024-03-13",
        "2024-03-14",
    ]
    assert daily[-1] == {"date": "2024-03-14", "totalSales": 33.0, "orderCount": 2}
    assert daily[4] == {"date": "2024-03-12", "totalSales": 12.0, "orderCount": 1}
    assert daily[0]["orderCount"] == 0


def test_weekly_sales_by_iso_week():
    weekly = build_dashboard(ORDERS, MENU, now=NOW, weeks=3)["weeklySales"]

    assert [point["date"] for point in weekly] == ["2024-W09", "2024-W10", "2024-W11"]
    assert weekly[-1] == {"date": "2024-W11", "totalSales": 45.0, "orderCount": 3}
    assert weekly[0] == {"date": "2024-W09", "totalSales": 7.5, "orderCount": 1}


def test_peak_hours_and_total_count():
    dashboard = build_dashboard(ORDERS, MENU, now=NOW)

    assert dashboard["peakOrderingHours"] == [
        {"hour": 9, "orderCount": 1},
        {"hour": 12, "orderCount": 2},
        {"hour": 19, "orderCount": 1},
    ]
    assert dashboard["totalOrdersCount"] == 4


def test_most_ordered_dishes():
    dishes = build_dashboard(ORDERS, MENU, now=NOW, limit=2)["mostOrderedDishes"]

    assert dishes == [
        {"menuItemId": "lemonade", "itemName": "Lemonade", "quantitySold": 5, "totalRevenue": 15.0},
        {"menuItemId": "pizza", "itemName": "Pizza", "quantitySold": 3, "totalRevenue": 30.0},
    ]


def test_category_revenue_with_uncategorized_fallback():
    revenue = build_dashboard(ORDERS, MENU, now=NOW)["categoryRevenue"]

    assert revenue == [
        {"categoryName": "Main Courses", "totalRevenue": 30.0},
        {"categoryName": "Beverages", "totalRevenue": 15.0},
        {"categoryName": "Uncategorized", "totalRevenue": 7.5},
    ]


@pytest.mark.asyncio
async def test_dashboard_endpoint(client: AsyncClient, test_menu_items):
    pizza = test_menu_items[0]
    response = await client.post(
        "/orders",
        json={
            "items": [{"menuItemId": str(pizza.id), "name": pizza.name, "quantity": 2, "priceAtOrder": pizza.price}],
            "customerName": "Dashboard Customer",
            "customerContact": "555-0123",
        },
    )
    assert response.status_code == 201

    response = await client.get("/analytics/dashboard")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["totalOrdersCount"] == 1
    assert len(data["dailySales"]) == 7
    assert data["dailySales"][-1]["totalSales"] == 25.0
    assert len(data["weeklySales"]) == 4
    assert data["mostOrderedDishes"][0]["itemName"] == "Margherita Pizza"
    assert data["categoryRevenue"] == [{"categoryName": "Main Courses", "totalRevenue": 25.0}]
