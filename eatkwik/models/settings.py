"""Restaurant settings model"""

from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Float, JSON, Text

from eatkwik.database import Base


class RestaurantSettings(Base):
    """Singleton restaurant settings, keyed by a fixed id"""
    __tablename__ = "restaurant_settings"

    id = Column(String(64), primary_key=True)

    # Business information
    restaurant_name = Column(String(255), nullable=False, default="EatKwik Central Kitchen")
    restaurant_address = Column(Text, nullable=False, default="123 Food Street, Flavor Town")
    restaurant_contact = Column(String(100), nullable=False, default="555-123-4567")

    # Operations
    accepting_online_orders = Column(Boolean, nullable=False, default=True)
    delivery_radius = Column(Float, nullable=False, default=5)  # km
    min_order_value = Column(Float, nullable=False, default=10)

    # [{"name": "Appetizers", "is_default": true, "is_visible": true, "is_custom": false}, ...]
    managed_categories = Column(JSON, nullable=False, default=list)

    # Developer toggle: dashboard shows sample data instead of live analytics
    use_placeholder_data = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
