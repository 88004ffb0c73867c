"""Test configuration and fixtures"""

import os
import tempfile

# Point the application at SQLite before anything from eatkwik is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(), "eatkwik.db")
os.environ.setdefault("LOG_FORMAT", "console")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from eatkwik.main import app
from eatkwik.database import get_db, init_db
from eatkwik.models.menu import MenuItem


@pytest.fixture
async def engine(tmp_path):
    """Fresh SQLite file database per test"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(session_factory):
    """Session for arranging and inspecting data directly"""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Create test client with a fresh database session per request"""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def menu_item_data():
    """Valid menu item creation body"""
    return {
        "name": "Margherita Pizza",
        "category": "Main Courses",
        "price": 12.5,
        "description": "Classic tomato and mozzarella",
        "ingredients": ["Dough", "Tomato Sauce", "Mozzarella"],
        "tags": ["vegetarian"],
        "prepTime": 15,
    }


@pytest.fixture
def order_data():
    """Valid order creation body totalling 28.00"""
    return {
        "items": [
            {"menuItemId": "item-1", "name": "Margherita Pizza", "quantity": 2, "priceAtOrder": 12.5},
            {"menuItemId": "item-2", "name": "Lemonade", "quantity": 1, "priceAtOrder": 3.0},
        ],
        "customerName": "Test Customer",
        "customerContact": "555-0100",
        "orderType": "Takeout",
        "totalAmount": 28.0,
    }


@pytest.fixture
async def test_menu_items(test_db):
    """Create test menu items"""
    items = [
        MenuItem(
            name="Margherita Pizza",
            category="Main Courses",
            price=12.5,
            description="Classic tomato and mozzarella",
            ingredients=["Dough", "Tomato Sauce", "Mozzarella"],
            tags=["vegetarian"],
        ),
        MenuItem(
            name="Caesar Salad",
            category="Salads",
            price=9.0,
            description="Romaine with caesar dressing",
            ingredients=["Romaine", "Croutons"],
            tags=[],
        ),
        MenuItem(
            name="Minestrone Soup",
            category="Soups",
            price=6.0,
            description="Vegetable soup",
            ingredients=["Beans", "Pasta"],
            tags=["vegan"],
            availability=False,
        ),
    ]

    for item in items:
        test_db.add(item)

    await test_db.commit()
    return items
