"""
Order lifecycle gate.

Statuses move Placed -> In Preparation -> Ready for Pickup / Out for Delivery
-> Delivered, with Cancelled reachable from any non-terminal status. The
transition table below encodes that progression. In permissive mode (the
default) any status may still be set from any other, so staff can revert a
mistaken change; moves outside the table are only logged. Strict mode rejects
them.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet

import structlog

from eatkwik.errors import ValidationFailedError

logger = structlog.get_logger()


class OrderStatus(str, Enum):
    """Order status, in lifecycle order"""

    PLACED = "Placed"
    IN_PREPARATION = "In Preparation"
    READY_FOR_PICKUP = "Ready for Pickup"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


ORDER_STATUSES = [status.value for status in OrderStatus]

TERMINAL_STATUSES: FrozenSet[OrderStatus] = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PLACED: frozenset({
        OrderStatus.IN_PREPARATION,
        OrderStatus.READY_FOR_PICKUP,
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.IN_PREPARATION: frozenset({
        OrderStatus.READY_FOR_PICKUP,
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.READY_FOR_PICKUP: frozenset({
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.OUT_FOR_DELIVERY: frozenset({
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def parse_status(value: str) -> OrderStatus:
    """Parse a raw status string, failing with a field error on unknown values"""
    try:
        return OrderStatus(value)
    except ValueError:
        raise ValidationFailedError(
            "Invalid input data",
            issues={"status": [f"Invalid status '{value}'. Expected one of: {', '.join(ORDER_STATUSES)}"]},
        )


def is_allowed(current: OrderStatus, target: OrderStatus) -> bool:
    """Whether the transition table permits moving from current to target"""
    return current == target or target in ALLOWED_TRANSITIONS[current]


class OrderLifecycle:
    """Validates and applies status changes on orders"""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def check(self, current: str, target: str) -> OrderStatus:
        """Return the parsed target status, raising if the move is not permitted"""
        target_status = parse_status(target)
        try:
            current_status = OrderStatus(current)
        except ValueError:
            # Legacy rows with an unknown status can always be corrected
            logger.warning("Order has unknown status", status=current)
            return target_status

        if is_allowed(current_status, target_status):
            return target_status

        if self.strict:
            raise ValidationFailedError(
                f"Cannot change order status from '{current_status.value}' to '{target_status.value}'",
                issues={"status": [f"Transition from '{current_status.value}' is not allowed"]},
            )

        logger.warning(
            "Order status moved outside lifecycle",
            from_status=current_status.value,
            to_status=target_status.value,
        )
        return target_status

    def apply(self, order, target: str) -> OrderStatus:
        """Set the order's status and touch updated_at"""
        previous = order.status
        new_status = self.check(previous, target)
        order.status = new_status.value
        order.updated_at = datetime.utcnow()
        logger.info(
            "Order status changed",
            order_number=order.order_number,
            from_status=previous,
            to_status=new_status.value,
        )
        return new_status
