"""Pydantic schemas for request/response validation"""

from eatkwik.schemas.common import (
    ApiResponse,
    CamelModel,
    MessageData,
)
from eatkwik.schemas.menu import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
    FeedbackCreate,
    FeedbackResponse,
)
from eatkwik.schemas.order import (
    OrderItem,
    OrderCreate,
    OrderUpdate,
    OrderResponse,
)
from eatkwik.schemas.intake import (
    IntakeDraftIn,
    IntakeLineIn,
    IntakeValidateRequest,
    IntakeValidateResponse,
)
from eatkwik.schemas.settings import (
    CategorySetting,
    SettingsUpdate,
    SettingsResponse,
)
from eatkwik.schemas.analytics import AnalyticsResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "MessageData",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
    "FeedbackCreate",
    "FeedbackResponse",
    "OrderItem",
    "OrderCreate",
    "OrderUpdate",
    "OrderResponse",
    "IntakeDraftIn",
    "IntakeLineIn",
    "IntakeValidateRequest",
    "IntakeValidateResponse",
    "CategorySetting",
    "SettingsUpdate",
    "SettingsResponse",
    "AnalyticsResponse",
]
