"""Menu catalog model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Float, JSON, Text
from sqlalchemy.dialects.postgresql import UUID

from eatkwik.database import Base


class MenuItem(Base):
    """Menu items"""
    __tablename__ = "menu_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)  # Managed category name
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    ingredients = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)  # ["vegan", "spicy", ...]
    availability = Column(Boolean, nullable=False, default=True)
    image_url = Column(String(1000))

    # [{"id": "...", "user_id": "...", "user_name": "...", "rating": 5, "comment": "...", "created_at": "..."}]
    feedbacks = Column(JSON, nullable=False, default=list)
    average_rating = Column(Float, nullable=False, default=0)

    prep_time = Column(Integer)  # Minutes
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
