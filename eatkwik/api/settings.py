"""Restaurant settings API endpoints"""

from datetime import datetime
from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eatkwik.config import settings
from eatkwik.database import get_db
from eatkwik.models.settings import RestaurantSettings
from eatkwik.schemas.common import ApiResponse
from eatkwik.schemas.settings import SettingsResponse, SettingsUpdate

logger = structlog.get_logger()

router = APIRouter()

DEFAULT_CATEGORIES = [
    "Appetizers",
    "Main Courses",
    "Desserts",
    "Beverages",
    "Sides",
    "Salads",
    "Soups",
    "Sandwiches",
]


def default_managed_categories() -> List[Dict[str, Any]]:
    return [
        {"name": name, "is_default": True, "is_visible": True, "is_custom": False}
        for name in DEFAULT_CATEGORIES
    ]


async def get_or_create_settings(db: AsyncSession) -> RestaurantSettings:
    """
    Load the settings singleton, creating it with defaults on first access.

    Concurrent first reads race on the fixed primary key; the loser rolls back
    and re-reads the winner's row.
    """
    document_id = settings.settings_document_id
    restaurant = await db.get(RestaurantSettings, document_id)

    if restaurant is None:
        db.add(RestaurantSettings(id=document_id, managed_categories=default_managed_categories()))
        try:
            await db.commit()
            logger.info("Restaurant settings created", settings_id=document_id)
        except IntegrityError:
            await db.rollback()
            logger.info("Restaurant settings created concurrently", settings_id=document_id)
        restaurant = await db.get(RestaurantSettings, document_id, populate_existing=True)

    if not restaurant.managed_categories:
        restaurant.managed_categories = default_managed_categories()
        await db.commit()
        await db.refresh(restaurant)
        logger.info("Restaurant categories restored to defaults", settings_id=document_id)

    return restaurant


@router.get("", response_model=ApiResponse[SettingsResponse])
async def get_settings(db: AsyncSession = Depends(get_db)):
    """Get restaurant settings"""
    restaurant = await get_or_create_settings(db)
    return ApiResponse(data=SettingsResponse.model_validate(restaurant))


@router.put("", response_model=ApiResponse[SettingsResponse])
async def update_settings(
    settings_data: SettingsUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update restaurant settings, creating the document if missing"""
    restaurant = await get_or_create_settings(db)

    for field, value in settings_data.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        setattr(restaurant, field, value)
    restaurant.updated_at = datetime.utcnow()

    await db.commit()
    await db.refresh(restaurant)

    logger.info("Restaurant settings updated", fields=sorted(settings_data.model_fields_set))
    return ApiResponse(data=SettingsResponse.model_validate(restaurant))
