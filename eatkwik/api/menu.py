"""Menu catalog API endpoints"""

import uuid
from datetime import datetime
from typing import List, Optional
from urllib.parse import quote

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from eatkwik.api.deps import parse_id
from eatkwik.config import settings
from eatkwik.database import get_db
from eatkwik.errors import NotFoundError
from eatkwik.models.menu import MenuItem
from eatkwik.schemas.common import ApiResponse, MessageData
from eatkwik.schemas.menu import (
    FeedbackCreate,
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
)

logger = structlog.get_logger()

router = APIRouter()

INVALID_ID = "Invalid Menu Item ID format"
NOT_FOUND = "Menu item not found"

# Update fields that keep their stored value when sent as null
NON_NULLABLE_UPDATES = {
    "name", "category", "price", "description", "ingredients",
    "tags", "availability", "prep_time",
}


def placeholder_image_url(name: str) -> str:
    """Placeholder image labelled with the dish name"""
    label = quote(name, safe="!*'()")
    return f"{settings.placeholder_image_url}?text={label}"


async def get_menu_item_or_404(db: AsyncSession, item_id: str) -> MenuItem:
    menu_item_id = parse_id(item_id, INVALID_ID)
    item = await db.get(MenuItem, menu_item_id)
    if not item:
        raise NotFoundError(NOT_FOUND)
    return item


@router.get("", response_model=ApiResponse[List[MenuItemResponse]])
async def list_menu_items(
    category: Optional[str] = None,
    available: Optional[bool] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """List menu items, newest first"""
    query = select(MenuItem)

    if category:
        query = query.where(MenuItem.category == category)

    if available is not None:
        query = query.where(MenuItem.availability == available)

    if search:
        search_term = f"%{search.lower()}%"
        query = query.where(
            or_(
                MenuItem.name.ilike(search_term),
                MenuItem.description.ilike(search_term),
                MenuItem.category.ilike(search_term),
            )
        )

    query = query.order_by(MenuItem.created_at.desc())

    result = await db.execute(query)
    items = result.scalars().all()
    return ApiResponse(data=[MenuItemResponse.model_validate(item) for item in items])


@router.post("", response_model=ApiResponse[MenuItemResponse], status_code=201)
async def create_menu_item(
    item_data: MenuItemCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new menu item"""
    item_dict = item_data.model_dump()
    if not item_dict.get("image_url"):
        item_dict["image_url"] = placeholder_image_url(item_data.name)

    item = MenuItem(**item_dict, feedbacks=[], average_rating=0)
    db.add(item)
    await db.commit()
    await db.refresh(item)

    logger.info("Menu item created", menu_item_id=str(item.id), name=item.name)
    return ApiResponse(data=MenuItemResponse.model_validate(item))


@router.get("/{item_id}", response_model=ApiResponse[MenuItemResponse])
async def get_menu_item(
    item_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific menu item"""
    item = await get_menu_item_or_404(db, item_id)
    return ApiResponse(data=MenuItemResponse.model_validate(item))


@router.put("/{item_id}", response_model=ApiResponse[MenuItemResponse])
async def update_menu_item(
    item_id: str,
    item_data: MenuItemUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a menu item"""
    item = await get_menu_item_or_404(db, item_id)

    for field, value in item_data.model_dump(exclude_unset=True).items():
        if value is None and field in NON_NULLABLE_UPDATES:
            continue
        setattr(item, field, value)
    item.updated_at = datetime.utcnow()

    await db.commit()
    await db.refresh(item)

    logger.info("Menu item updated", menu_item_id=str(item.id))
    return ApiResponse(data=MenuItemResponse.model_validate(item))


@router.delete("/{item_id}", response_model=ApiResponse[MessageData])
async def delete_menu_item(
    item_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a menu item"""
    item = await get_menu_item_or_404(db, item_id)

    await db.delete(item)
    await db.commit()

    logger.info("Menu item deleted", menu_item_id=item_id)
    return ApiResponse(data=MessageData(message="Menu item deleted successfully"))


@router.post("/{item_id}/feedbacks", response_model=ApiResponse[MenuItemResponse], status_code=201)
async def add_feedback(
    item_id: str,
    feedback_data: FeedbackCreate,
    db: AsyncSession = Depends(get_db),
):
    """Append customer feedback and recompute the average rating"""
    item = await get_menu_item_or_404(db, item_id)

    feedback = {
        "id": str(uuid.uuid4()),
        **feedback_data.model_dump(),
        "created_at": datetime.utcnow().isoformat(),
    }
    # Reassign so the JSON column is flagged dirty
    feedbacks = list(item.feedbacks or []) + [feedback]
    item.feedbacks = feedbacks
    item.average_rating = round(sum(entry["rating"] for entry in feedbacks) / len(feedbacks), 2)
    item.updated_at = datetime.utcnow()

    await db.commit()
    await db.refresh(item)

    logger.info(
        "Menu item feedback added",
        menu_item_id=str(item.id),
        rating=feedback_data.rating,
        average_rating=item.average_rating,
    )
    return ApiResponse(data=MenuItemResponse.model_validate(item))
