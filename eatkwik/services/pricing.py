"""Order total computation and verification"""

from typing import Any, Iterable, Mapping, Optional, Union

from eatkwik.errors import ValidationFailedError

LineItem = Union[Mapping[str, Any], Any]


def _line_value(item: LineItem, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def compute_total(items: Iterable[LineItem]) -> float:
    """Sum of quantity * price_at_order over the order lines, rounded to cents"""
    total = 0.0
    for item in items:
        quantity = _line_value(item, "quantity") or 0
        price = _line_value(item, "price_at_order") or 0
        total += quantity * price
    return round(total, 2)


def resolve_total(
    items: Iterable[LineItem],
    submitted: Optional[float],
    verify: bool = True,
    tolerance: float = 0.01,
) -> float:
    """
    Decide the total to store for an order.

    A missing total is computed from the lines. A submitted total is kept
    verbatim, but when verification is on it must match the computed one.
    """
    computed = compute_total(items)
    if submitted is None:
        return computed

    if verify and abs(submitted - computed) > tolerance:
        raise ValidationFailedError(
            "Total amount does not match order items",
            issues={"totalAmount": [f"Expected {computed:.2f} from line items, got {submitted:.2f}"]},
        )
    return submitted
