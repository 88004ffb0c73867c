"""Order model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Float, JSON, Text
from sqlalchemy.dialects.postgresql import UUID

from eatkwik.database import Base


class Order(Base):
    """Customer orders"""
    __tablename__ = "orders"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_number = Column(String(32), unique=True, nullable=False, index=True)

    # Customer information
    customer_id = Column(String(255), index=True)
    customer_name = Column(String(255), nullable=False)
    customer_contact = Column(String(255), nullable=False)  # Phone or email

    # Order details
    # [{"menu_item_id": "...", "name": "...", "quantity": 1, "price_at_order": 499.0, "customizations": "..."}, ...]
    items_json = Column(JSON, nullable=False)
    order_type = Column(String(20))  # Takeout, Delivery
    total_amount = Column(Float, nullable=False)

    # Status
    status = Column(String(50), nullable=False, default="Placed", index=True)  # See services.lifecycle.OrderStatus

    # Delivery
    delivery_address = Column(Text)
    estimated_delivery_time = Column(String(64))  # ISO-8601

    notes = Column(Text)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
