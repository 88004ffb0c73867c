"""Tests for the multi-step order intake"""

import pytest
from httpx import AsyncClient

from eatkwik.errors import ValidationFailedError
from eatkwik.services.intake import (
    CatalogEntry,
    IntakeDraft,
    IntakeStep,
    OrderIntakeWizard,
    validate_step,
)

CATALOG = [
    CatalogEntry(id="pizza", name="Margherita Pizza", price=12.5),
    CatalogEntry(id="soup", name="Minestrone Soup", price=6.0, availability=False),
]


def filled_wizard() -> OrderIntakeWizard:
    wizard = OrderIntakeWizard(CATALOG)
    wizard.draft.order_type = "Takeout"
    wizard.draft.customer_name = "Grace"
    wizard.draft.customer_contact = "555-0199"
    wizard.select_item(0, "pizza")
    wizard.draft.items[0].quantity = 2
    return wizard


def test_next_blocks_on_missing_order_type():
    wizard = OrderIntakeWizard(CATALOG)

    assert wizard.next() is False
    assert wizard.step == IntakeStep.ORDER_TYPE
    assert wizard.errors == {"orderType": ["Please select an order type."]}


def test_only_active_step_is_validated():
    wizard = OrderIntakeWizard(CATALOG)
    wizard.draft.order_type = "Delivery"

    # Customer fields are still empty but step 1 does not look at them
    assert wizard.next() is True
    assert wizard.step == IntakeStep.CUSTOMER
    assert wizard.errors == {}


def test_delivery_requires_address():
    draft = IntakeDraft(order_type="Delivery", customer_name="Grace", customer_contact="555-0199")

    errors = validate_step(draft, IntakeStep.CUSTOMER)

    assert list(errors) == ["deliveryAddress"]


def test_takeout_does_not_require_address():
    draft = IntakeDraft(order_type="Takeout", customer_name="Grace", customer_contact="555-0199")

    assert validate_step(draft, IntakeStep.CUSTOMER) == {}


def test_items_step_reports_per_line_errors():
    wizard = filled_wizard()
    index = wizard.add_item()
    wizard.draft.items[index].quantity = 0

    errors = validate_step(wizard.draft, IntakeStep.ITEMS)

    assert errors == {
        "items.1.menuItemId": ["Item selection is required."],
        "items.1.quantity": ["Quantity must be at least 1."],
    }


def test_items_step_requires_a_line():
    wizard = filled_wizard()
    wizard.remove_item(0)

    assert validate_step(wizard.draft, IntakeStep.ITEMS) == {"items": ["Order must contain at least one item."]}


def test_select_item_fills_name_and_price():
    wizard = OrderIntakeWizard(CATALOG)

    line = wizard.select_item(0, "pizza")

    assert line.name == "Margherita Pizza"
    assert line.price_at_order == 12.5


def test_back_is_noop_on_first_step():
    wizard = OrderIntakeWizard(CATALOG)

    assert wizard.back() == IntakeStep.ORDER_TYPE


def test_walk_to_review_and_submit():
    wizard = filled_wizard()

    for expected in (IntakeStep.CUSTOMER, IntakeStep.ITEMS, IntakeStep.REVIEW):
        assert wizard.next() is True
        assert wizard.step == expected

    assert wizard.total_amount == 25.0
    payload = wizard.submit()

    assert payload["status"] == "Placed"
    assert payload["total_amount"] == 25.0
    assert payload["delivery_address"] is None
    assert payload["items"] == [
        {
            "menu_item_id": "pizza",
            "name": "Margherita Pizza",
            "quantity": 2,
            "price_at_order": 12.5,
            "customizations": None,
        }
    ]


def test_submit_requires_review_step():
    wizard = filled_wizard()

    with pytest.raises(ValidationFailedError) as exc_info:
        wizard.submit()

    assert "step" in exc_info.value.issues


def test_submit_rejects_unavailable_item():
    wizard = filled_wizard()
    wizard.select_item(0, "soup")
    wizard.step = IntakeStep.REVIEW

    with pytest.raises(ValidationFailedError) as exc_info:
        wizard.submit()

    assert exc_info.value.issues == {"items.0.menuItemId": ["'Minestrone Soup' is currently unavailable."]}


def intake_body(menu_item_id: str, quantity: int = 1) -> dict:
    return {
        "orderType": "Delivery",
        "customerName": "Grace Hopper",
        "customerContact": "grace@example.com",
        "deliveryAddress": "1 Navy Yard",
        "items": [{"menuItemId": menu_item_id, "quantity": quantity, "priceAtOrder": 0.01}],
        "notes": "Ring twice",
    }


@pytest.mark.asyncio
async def test_validate_step_endpoint(client: AsyncClient):
    response = await client.post(
        "/orders/intake/validate",
        json={"step": 1, "draft": {"orderType": "Takeout"}},
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"step": 1, "nextStep": 2, "totalAmount": 0.0}


@pytest.mark.asyncio
async def test_validate_step_endpoint_reports_issues(client: AsyncClient):
    response = await client.post(
        "/orders/intake/validate",
        json={"step": 2, "draft": {"orderType": "Delivery", "customerName": "G"}},
    )

    assert response.status_code == 400
    issues = response.json()["issues"]
    assert set(issues) == {"customerName", "customerContact", "deliveryAddress"}


@pytest.mark.asyncio
async def test_submit_intake_prices_from_catalog(client: AsyncClient, test_menu_items):
    pizza = test_menu_items[0]

    response = await client.post("/orders/intake", json=intake_body(str(pizza.id), quantity=2))

    assert response.status_code == 201
    order = response.json()["data"]
    assert order["status"] == "Placed"
    assert order["orderType"] == "Delivery"
    assert order["totalAmount"] == 25.0
    assert order["items"][0]["priceAtOrder"] == 12.5
    assert order["items"][0]["name"] == "Margherita Pizza"
    assert order["deliveryAddress"] == "1 Navy Yard"


@pytest.mark.asyncio
async def test_submit_intake_unknown_item(client: AsyncClient, test_menu_items):
    response = await client.post("/orders/intake", json=intake_body("not-a-menu-item", quantity=3))

    assert response.status_code == 400
    assert response.json()["issues"] == {"items.0.menuItemId": ["Menu item not found."]}


@pytest.mark.asyncio
async def test_submit_intake_below_minimum(client: AsyncClient, test_menu_items):
    salad = test_menu_items[1]

    response = await client.post("/orders/intake", json=intake_body(str(salad.id)))

    assert response.status_code == 400
    assert "totalAmount" in response.json()["issues"]


@pytest.mark.asyncio
async def test_submit_intake_when_not_accepting_orders(client: AsyncClient, test_menu_items):
    await client.put("/settings", json={"acceptingOnlineOrders": False})

    response = await client.post("/orders/intake", json=intake_body(str(test_menu_items[0].id), quantity=2))

    assert response.status_code == 400
    assert response.json()["error"] == "The restaurant is not accepting online orders right now"
