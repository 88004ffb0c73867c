"""Dashboard analytics API endpoints"""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eatkwik.config import settings
from eatkwik.database import get_db
from eatkwik.models.menu import MenuItem
from eatkwik.models.order import Order
from eatkwik.schemas.analytics import AnalyticsResponse
from eatkwik.schemas.common import ApiResponse
from eatkwik.services.analytics import build_dashboard

router = APIRouter()


@router.get("/dashboard", response_model=ApiResponse[AnalyticsResponse])
async def get_dashboard(db: AsyncSession = Depends(get_db)):
    """Live sales analytics for the admin dashboard"""
    orders = (await db.execute(select(Order))).scalars().all()
    menu_items = (await db.execute(select(MenuItem))).scalars().all()

    dashboard = build_dashboard(
        list(orders),
        menu_items,
        now=datetime.utcnow(),
        days=settings.analytics_days,
        weeks=settings.analytics_weeks,
        limit=settings.top_dishes_limit,
    )
    return ApiResponse(data=AnalyticsResponse.model_validate(dashboard))
