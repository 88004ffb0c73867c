"""Database models"""

from eatkwik.models.menu import MenuItem
from eatkwik.models.order import Order
from eatkwik.models.settings import RestaurantSettings

__all__ = [
    "MenuItem",
    "Order",
    "RestaurantSettings",
]
