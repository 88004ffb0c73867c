"""Order schemas"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import AwareDatetime, Field, TypeAdapter, ValidationError, field_validator

from eatkwik.schemas.common import CamelModel
from eatkwik.services.intake import OrderType
from eatkwik.services.lifecycle import OrderStatus

_aware_datetime = TypeAdapter(AwareDatetime)


def _check_delivery_time(value: Optional[str]) -> Optional[str]:
    # Stored as submitted once it parses as an ISO-8601 datetime with an offset
    if value is None:
        return value
    try:
        _aware_datetime.validate_python(value)
    except ValidationError:
        raise ValueError("Estimated delivery time must be an ISO-8601 datetime with a timezone offset")
    return value


class OrderItem(CamelModel):
    """Order line with the dish name and price denormalised at order time"""
    menu_item_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    quantity: int = Field(ge=1)
    price_at_order: float = Field(gt=0)
    customizations: Optional[str] = None


class OrderCreate(CamelModel):
    """Create order request"""
    items: List[OrderItem] = Field(min_length=1)
    customer_id: Optional[str] = None
    customer_name: str = Field(min_length=1)
    customer_contact: str = Field(min_length=1)
    status: OrderStatus = OrderStatus.PLACED
    order_type: Optional[OrderType] = None
    total_amount: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None
    delivery_address: Optional[str] = None
    estimated_delivery_time: Optional[str] = None

    @field_validator("estimated_delivery_time")
    @classmethod
    def delivery_time_is_iso(cls, value):
        return _check_delivery_time(value)


class OrderUpdate(CamelModel):
    """Partial order update. Status is checked by the lifecycle gate."""
    items: Optional[List[OrderItem]] = Field(default=None, min_length=1)
    customer_id: Optional[str] = None
    customer_name: Optional[str] = Field(default=None, min_length=1)
    customer_contact: Optional[str] = Field(default=None, min_length=1)
    status: Optional[str] = None
    order_type: Optional[OrderType] = None
    total_amount: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None
    delivery_address: Optional[str] = None
    estimated_delivery_time: Optional[str] = None

    @field_validator("estimated_delivery_time")
    @classmethod
    def delivery_time_is_iso(cls, value):
        return _check_delivery_time(value)


class OrderResponse(CamelModel):
    """Order response"""
    id: UUID
    order_number: str
    items: List[OrderItem]
    customer_id: Optional[str] = None
    customer_name: str
    customer_contact: str
    status: str
    order_type: Optional[str] = None
    total_amount: float
    notes: Optional[str] = None
    delivery_address: Optional[str] = None
    estimated_delivery_time: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            id=order.id,
            order_number=order.order_number,
            items=[OrderItem.model_construct(**line) for line in order.items_json or []],
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            customer_contact=order.customer_contact,
            status=order.status,
            order_type=order.order_type,
            total_amount=order.total_amount,
            notes=order.notes,
            delivery_address=order.delivery_address,
            estimated_delivery_time=order.estimated_delivery_time,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
