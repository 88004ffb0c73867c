"""Tests for the demo seed script"""

import pytest
from sqlalchemy import func, select

from eatkwik.models.menu import MenuItem
from eatkwik.models.settings import RestaurantSettings
from scripts.seed_demo import DEMO_MENU_ITEMS, seed_demo_data


@pytest.mark.asyncio
async def test_seed_creates_menu_and_settings(session_factory, test_db):
    created = await seed_demo_data(session_factory)

    assert created == len(DEMO_MENU_ITEMS) == 10
    assert await test_db.scalar(select(func.count()).select_from(MenuItem)) == 10
    assert await test_db.scalar(select(func.count()).select_from(RestaurantSettings)) == 1

    soup = await test_db.scalar(select(MenuItem).where(MenuItem.name == "Hearty Minestrone Soup"))
    assert soup.availability is False
    assert "Hearty%20Minestrone%20Soup" in soup.image_url


@pytest.mark.asyncio
async def test_seed_is_idempotent(session_factory, test_db):
    await seed_demo_data(session_factory)

    assert await seed_demo_data(session_factory) == 0
    assert await test_db.scalar(select(func.count()).select_from(MenuItem)) == 10
