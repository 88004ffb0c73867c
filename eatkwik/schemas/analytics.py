"""Dashboard analytics schemas"""

from typing import List, Optional

from eatkwik.schemas.common import CamelModel


class SalesDataPoint(CamelModel):
    date: str  # YYYY-MM-DD or YYYY-Www
    total_sales: float
    order_count: int


class PeakHourDataPoint(CamelModel):
    hour: int
    order_count: int


class ItemSalesDataPoint(CamelModel):
    menu_item_id: Optional[str] = None
    item_name: Optional[str] = None
    quantity_sold: int
    total_revenue: float


class CategorySalesDataPoint(CamelModel):
    category_name: str
    total_revenue: float


class AnalyticsResponse(CamelModel):
    """Dashboard payload"""
    daily_sales: List[SalesDataPoint]
    weekly_sales: List[SalesDataPoint]
    peak_ordering_hours: List[PeakHourDataPoint]
    total_orders_count: int
    most_ordered_dishes: List[ItemSalesDataPoint]
    category_revenue: List[CategorySalesDataPoint]
