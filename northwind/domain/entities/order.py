"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Tuple

from ..value_objects import ShippingAddress
from .snapshots import Customer, Employee, Product, Shipper


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _check_money(name: str, amount: Decimal) -> None:
    """Money is finite, non-negative and stored to the cent."""
    if not amount.is_finite():
        raise ValueError(f"{name} must be a finite amount: {amount}")
    if amount < 0:
        raise ValueError(f"{name} cannot be negative: {amount}")
    if amount.normalize().as_tuple().exponent < -2:
        raise ValueError(f"{name} must have at most two decimal places: {amount}")


@dataclass(frozen=True)
class OrderDetail:
    """
    Line item within an order.

    Identity is the composite (order_id, product_id); a product appears
    at most once per order.
    """
    order_id: int
    product: Product
    unit_price: Decimal
    quantity: int
    discount: float = 0.0

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.unit_price, Decimal):
            object.__setattr__(self, "unit_price", Decimal(str(self.unit_price)))

        if self.product is None:
            raise ValueError("Order detail requires a product")
        _check_money("Unit price", self.unit_price)
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive: {self.quantity}")
        if not 0 <= self.discount < 1:
            raise ValueError(f"Discount must be in [0, 1): {self.discount}")

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def key(self) -> Tuple[int, int]:
        """Composite identity of the line."""
        return (self.order_id, self.product.id)


@dataclass(frozen=True)
class Order:
    """
    Order aggregate root.

    Built in one constructor call with every reference populated. An id
    of 0 means the identity has not been assigned by storage yet.
    Changes produce new instances (see with_id and brief).
    """
    id: int
    customer: Customer
    employee: Employee
    shipper: Shipper
    order_date: datetime
    required_date: datetime
    shipped_date: Optional[datetime] = None
    freight: Decimal = Decimal("0")
    ship_name: str = ""
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    order_details: Tuple[OrderDetail, ...] = ()

    def __post_init__(self):
        for name in ("order_date", "required_date", "shipped_date"):
            object.__setattr__(self, name, to_naive_utc(getattr(self, name)))
        if not isinstance(self.freight, Decimal):
            object.__setattr__(self, "freight", Decimal(str(self.freight)))
        if self.ship_name is None:
            object.__setattr__(self, "ship_name", "")
        if self.shipping_address is None:
            object.__setattr__(self, "shipping_address", ShippingAddress())
        if not isinstance(self.order_details, tuple):
            object.__setattr__(self, "order_details", tuple(self.order_details))

        if self.id < 0:
            raise ValueError(f"Order id cannot be negative: {self.id}")
        if self.customer is None or self.employee is None or self.shipper is None:
            raise ValueError("Order requires customer, employee and shipper")
        _check_money("Freight", self.freight)
        if self.required_date < self.order_date:
            raise ValueError(
                f"Required date {self.required_date} is before order date {self.order_date}"
            )
        if self.shipped_date is not None and self.shipped_date < self.order_date:
            raise ValueError(
                f"Shipped date {self.shipped_date} is before order date {self.order_date}"
            )

        product_ids = [detail.product_id for detail in self.order_details]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError(f"Duplicate products in order {self.id}: {product_ids}")

    def with_id(self, order_id: int) -> "Order":
        """Return a copy carrying the identity assigned by storage."""
        details = tuple(replace(detail, order_id=order_id) for detail in self.order_details)
        return replace(self, id=order_id, order_details=details)

    def brief(self) -> "Order":
        """Return the list-view projection without line items."""
        return replace(self, order_details=())

