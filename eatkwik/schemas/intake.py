"""Order intake schemas"""

from typing import List, Optional

from pydantic import Field

from eatkwik.schemas.common import CamelModel
from eatkwik.services.intake import IntakeDraft, IntakeLine, TOTAL_STEPS


class IntakeLineIn(CamelModel):
    menu_item_id: str = ""
    name: str = ""
    quantity: Optional[int] = 1
    price_at_order: float = 0
    customizations: Optional[str] = None


class IntakeDraftIn(CamelModel):
    """Wizard form state as submitted by the client"""
    order_type: Optional[str] = None
    customer_name: str = ""
    customer_contact: str = ""
    delivery_address: Optional[str] = ""
    items: List[IntakeLineIn] = []
    notes: Optional[str] = ""

    def to_draft(self) -> IntakeDraft:
        return IntakeDraft(
            order_type=self.order_type,
            customer_name=self.customer_name,
            customer_contact=self.customer_contact,
            delivery_address=self.delivery_address or "",
            items=[IntakeLine(**line.model_dump()) for line in self.items],
            notes=self.notes or "",
        )


class IntakeValidateRequest(CamelModel):
    step: int = Field(ge=1, le=TOTAL_STEPS)
    draft: IntakeDraftIn


class IntakeValidateResponse(CamelModel):
    step: int
    next_step: int
    total_amount: float
