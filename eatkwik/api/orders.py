"""Order management API endpoints"""

import random
import time
from typing import Any, Dict, List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eatkwik.api.deps import get_lifecycle, parse_id
from eatkwik.api.settings import get_or_create_settings
from eatkwik.config import settings
from eatkwik.database import get_db
from eatkwik.errors import NotFoundError, ValidationFailedError
from eatkwik.models.menu import MenuItem
from eatkwik.models.order import Order
from eatkwik.schemas.common import ApiResponse, MessageData
from eatkwik.schemas.intake import IntakeDraftIn, IntakeValidateRequest, IntakeValidateResponse
from eatkwik.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from eatkwik.services.intake import (
    CatalogEntry,
    IntakeStep,
    OrderIntakeWizard,
    TOTAL_STEPS,
    validate_step,
)
from eatkwik.services.lifecycle import OrderLifecycle, parse_status
from eatkwik.services.pricing import resolve_total

logger = structlog.get_logger()

router = APIRouter()

INVALID_ID = "Invalid Order ID format"
NOT_FOUND = "Order not found"

NON_NULLABLE_UPDATES = {"customer_name", "customer_contact", "order_type"}


def _order_number_candidate(attempt: int) -> str:
    if attempt == 0:
        suffix = int(time.time() * 1000) % 1_000_000
    else:
        suffix = random.randint(0, 999_999)
    return f"{settings.order_number_prefix}{suffix:06d}"


async def generate_order_number(db: AsyncSession) -> str:
    """
    Timestamp-based order number, falling back to random suffixes on collision.

    The unique index on order_number still guards against a race between the
    check and the insert.
    """
    candidate = ""
    for attempt in range(settings.order_number_attempts):
        candidate = _order_number_candidate(attempt)
        existing = await db.scalar(select(Order.id).where(Order.order_number == candidate))
        if existing is None:
            return candidate
        logger.info("Order number collision", order_number=candidate, attempt=attempt)
    return candidate


async def create_order_record(db: AsyncSession, order_data: Dict[str, Any]) -> Order:
    """Persist a new order from snake_case creation data"""
    items = order_data.pop("items")
    total_amount = resolve_total(
        items,
        order_data.pop("total_amount", None),
        verify=settings.verify_order_totals,
        tolerance=settings.total_tolerance,
    )

    order = Order(
        order_number=await generate_order_number(db),
        items_json=items,
        total_amount=total_amount,
        **order_data,
    )
    db.add(order)
    await db.commit()
    await db.refresh(order)

    logger.info(
        "Order created",
        order_id=str(order.id),
        order_number=order.order_number,
        total_amount=order.total_amount,
        status=order.status,
    )
    return order


async def get_order_or_404(db: AsyncSession, order_id: str) -> Order:
    order = await db.get(Order, parse_id(order_id, INVALID_ID))
    if not order:
        raise NotFoundError(NOT_FOUND)
    return order


@router.get("", response_model=ApiResponse[List[OrderResponse]])
async def list_orders(
    status: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """List orders, newest first"""
    query = select(Order)

    if status:
        query = query.where(Order.status == parse_status(status).value)

    query = query.order_by(Order.created_at.desc())

    result = await db.execute(query)
    orders = result.scalars().all()
    return ApiResponse(data=[OrderResponse.from_order(order) for order in orders])


@router.post("", response_model=ApiResponse[OrderResponse], status_code=201)
async def create_order(
    order_data: OrderCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new order"""
    order = await create_order_record(db, order_data.model_dump(mode="json"))
    return ApiResponse(data=OrderResponse.from_order(order))


@router.post("/intake/validate", response_model=ApiResponse[IntakeValidateResponse])
async def validate_intake_step(request: IntakeValidateRequest):
    """Validate one step of the order intake wizard"""
    draft = request.draft.to_draft()
    errors = validate_step(draft, request.step)
    if errors:
        raise ValidationFailedError("Invalid input data", issues=errors)

    return ApiResponse(
        data=IntakeValidateResponse(
            step=request.step,
            next_step=min(request.step + 1, TOTAL_STEPS),
            total_amount=draft.total_amount,
        )
    )


@router.post("/intake", response_model=ApiResponse[OrderResponse], status_code=201)
async def submit_intake(
    draft_data: IntakeDraftIn,
    db: AsyncSession = Depends(get_db),
):
    """Submit a completed intake draft, pricing every line from the catalog"""
    menu_item_ids = []
    for line in draft_data.items:
        try:
            menu_item_ids.append(UUID(line.menu_item_id))
        except ValueError:
            continue

    catalog = []
    if menu_item_ids:
        result = await db.execute(select(MenuItem).where(MenuItem.id.in_(menu_item_ids)))
        catalog = [
            CatalogEntry(id=str(item.id), name=item.name, price=item.price, availability=item.availability)
            for item in result.scalars().all()
        ]

    wizard = OrderIntakeWizard(catalog, draft_data.to_draft(), step=IntakeStep.REVIEW)
    payload = wizard.submit()

    restaurant = await get_or_create_settings(db)
    if not restaurant.accepting_online_orders:
        raise ValidationFailedError("The restaurant is not accepting online orders right now")
    if payload["total_amount"] < restaurant.min_order_value:
        raise ValidationFailedError(
            "Order total is below the minimum order value",
            issues={"totalAmount": [f"Minimum order value is {restaurant.min_order_value:.2f}"]},
        )

    order = await create_order_record(db, payload)
    return ApiResponse(data=OrderResponse.from_order(order))


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse])
async def get_order(
    order_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get an order by id or by order number"""
    try:
        order = await db.get(Order, UUID(order_id))
    except ValueError:
        order = await db.scalar(select(Order).where(Order.order_number == order_id))

    if not order:
        raise NotFoundError(NOT_FOUND)

    return ApiResponse(data=OrderResponse.from_order(order))


@router.put("/{order_id}", response_model=ApiResponse[OrderResponse])
async def update_order(
    order_id: str,
    order_data: OrderUpdate,
    db: AsyncSession = Depends(get_db),
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
):
    """Update an order"""
    order = await get_order_or_404(db, order_id)

    updates = order_data.model_dump(mode="json", exclude_unset=True)
    new_status = updates.pop("status", None)
    items = updates.pop("items", None)
    submitted_total = updates.pop("total_amount", None)

    if items is not None or submitted_total is not None:
        total_amount = resolve_total(
            items if items is not None else order.items_json,
            submitted_total,
            verify=settings.verify_order_totals,
            tolerance=settings.total_tolerance,
        )
        if items is not None:
            order.items_json = items
        order.total_amount = total_amount

    if new_status is not None:
        lifecycle.apply(order, new_status)

    for field, value in updates.items():
        if value is None and field in NON_NULLABLE_UPDATES:
            continue
        setattr(order, field, value)

    await db.commit()
    await db.refresh(order)

    logger.info("Order updated", order_number=order.order_number, fields=sorted(order_data.model_fields_set))
    return ApiResponse(data=OrderResponse.from_order(order))


@router.delete("/{order_id}", response_model=ApiResponse[MessageData])
async def delete_order(
    order_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete an order"""
    order = await get_order_or_404(db, order_id)

    await db.delete(order)
    await db.commit()

    logger.info("Order deleted", order_number=order.order_number)
    return ApiResponse(data=MessageData(message="Order deleted successfully"))
