"""
Multi-step order intake.

Models the customer ordering wizard: order type, contact details, line items,
then a read-only review before submission. Only the active step's fields are
validated before moving forward; moving back is always allowed. Nothing is
persisted until the wizard is submitted.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Iterable, List, Optional

from eatkwik.errors import FieldErrors, ValidationFailedError
from eatkwik.services.lifecycle import OrderStatus
from eatkwik.services.pricing import compute_total


class OrderType(str, Enum):
    TAKEOUT = "Takeout"
    DELIVERY = "Delivery"


class IntakeStep(IntEnum):
    ORDER_TYPE = 1
    CUSTOMER = 2
    ITEMS = 3
    REVIEW = 4


TOTAL_STEPS = len(IntakeStep)

MIN_NAME_LENGTH = 2
MIN_CONTACT_LENGTH = 5
MIN_ADDRESS_LENGTH = 5


@dataclass
class CatalogEntry:
    """The part of a menu item the wizard needs to price a line"""
    id: str
    name: str
    price: float
    availability: bool = True


@dataclass
class IntakeLine:
    menu_item_id: str = ""
    name: str = ""
    quantity: int = 1
    price_at_order: float = 0.0
    customizations: Optional[str] = None


@dataclass
class IntakeDraft:
    order_type: Optional[str] = None
    customer_name: str = ""
    customer_contact: str = ""
    delivery_address: str = ""
    items: List[IntakeLine] = field(default_factory=lambda: [IntakeLine()])
    notes: str = ""

    @property
    def total_amount(self) -> float:
        return compute_total(self.items)


def _validate_order_type(draft: IntakeDraft) -> FieldErrors:
    if draft.order_type not in {order_type.value for order_type in OrderType}:
        return {"orderType": ["Please select an order type."]}
    return {}


def _validate_customer(draft: IntakeDraft) -> FieldErrors:
    errors: FieldErrors = {}
    if len(draft.customer_name or "") < MIN_NAME_LENGTH:
        errors["customerName"] = ["Name must be at least 2 characters."]
    if len(draft.customer_contact or "") < MIN_CONTACT_LENGTH:
        errors["customerContact"] = ["Contact information is required (min 5 chars)."]
    if draft.order_type == OrderType.DELIVERY.value and len(draft.delivery_address or "") < MIN_ADDRESS_LENGTH:
        errors["deliveryAddress"] = ["Delivery address is required for delivery (min 5 chars)."]
    return errors


def _validate_items(draft: IntakeDraft) -> FieldErrors:
    if not draft.items:
        return {"items": ["Order must contain at least one item."]}

    errors: FieldErrors = {}
    for index, line in enumerate(draft.items):
        if not line.menu_item_id:
            errors[f"items.{index}.menuItemId"] = ["Item selection is required."]
        if line.quantity is None or line.quantity < 1:
            errors[f"items.{index}.quantity"] = ["Quantity must be at least 1."]
    return errors


def _validate_review(draft: IntakeDraft) -> FieldErrors:
    return {}


STEP_VALIDATORS: Dict[IntakeStep, Callable[[IntakeDraft], FieldErrors]] = {
    IntakeStep.ORDER_TYPE: _validate_order_type,
    IntakeStep.CUSTOMER: _validate_customer,
    IntakeStep.ITEMS: _validate_items,
    IntakeStep.REVIEW: _validate_review,
}


def validate_step(draft: IntakeDraft, step: int) -> FieldErrors:
    """Validate only the fields owned by the given step"""
    return STEP_VALIDATORS[IntakeStep(step)](draft)


def validate_all(draft: IntakeDraft) -> FieldErrors:
    errors: FieldErrors = {}
    for step in IntakeStep:
        errors.update(validate_step(draft, step))
    return errors


class OrderIntakeWizard:
    """Step-gated order intake over a menu catalog"""

    def __init__(
        self,
        catalog: Iterable[CatalogEntry] = (),
        draft: Optional[IntakeDraft] = None,
        step: int = IntakeStep.ORDER_TYPE,
    ):
        self.catalog = {entry.id: entry for entry in catalog}
        self.draft = draft if draft is not None else IntakeDraft()
        self.step = IntakeStep(step)
        self.errors: FieldErrors = {}

    @property
    def total_amount(self) -> float:
        return self.draft.total_amount

    @property
    def is_review(self) -> bool:
        return self.step == IntakeStep.REVIEW

    def select_item(self, index: int, menu_item_id: str) -> IntakeLine:
        """Point a line at a catalog item, copying its name and current price"""
        line = self.draft.items[index]
        line.menu_item_id = menu_item_id
        entry = self.catalog.get(menu_item_id)
        line.name = entry.name if entry else ""
        line.price_at_order = entry.price if entry else 0.0
        return line

    def add_item(self) -> int:
        self.draft.items.append(IntakeLine())
        return len(self.draft.items) - 1

    def remove_item(self, index: int) -> None:
        del self.draft.items[index]

    def next(self) -> bool:
        """Advance one step if the active step validates"""
        self.errors = validate_step(self.draft, self.step)
        if self.errors:
            return False
        if self.step < IntakeStep.REVIEW:
            self.step = IntakeStep(self.step + 1)
        return True

    def back(self) -> IntakeStep:
        if self.step > IntakeStep.ORDER_TYPE:
            self.step = IntakeStep(self.step - 1)
        self.errors = {}
        return self.step

    def price_from_catalog(self) -> FieldErrors:
        """Re-price every selected line from the catalog"""
        errors: FieldErrors = {}
        for index, line in enumerate(self.draft.items):
            if not line.menu_item_id:
                continue
            entry = self.catalog.get(line.menu_item_id)
            if entry is None:
                errors[f"items.{index}.menuItemId"] = ["Menu item not found."]
            elif not entry.availability:
                errors[f"items.{index}.menuItemId"] = [f"'{entry.name}' is currently unavailable."]
            else:
                line.name = entry.name
                line.price_at_order = entry.price
        return errors

    def submit(self, price_lines: bool = True) -> Dict[str, Any]:
        """
        Validate every step and build the order creation payload.

        Only allowed from the review step.
        """
        if not self.is_review:
            raise ValidationFailedError(
                "Order intake must reach the review step before submission",
                issues={"step": [f"Current step is {int(self.step)} of {TOTAL_STEPS}."]},
            )

        errors = validate_all(self.draft)
        if price_lines:
            for key, messages in self.price_from_catalog().items():
                errors.setdefault(key, []).extend(messages)
        if errors:
            self.errors = errors
            raise ValidationFailedError("Invalid input data", issues=errors)

        draft = self.draft
        return {
            "order_type": draft.order_type,
            "customer_name": draft.customer_name,
            "customer_contact": draft.customer_contact,
            "delivery_address": draft.delivery_address or None,
            "notes": draft.notes or None,
            "items": [asdict(line) for line in draft.items],
            "total_amount": draft.total_amount,
            "status": OrderStatus.PLACED.value,
        }
