"""Domain value objects."""

from .customer_code import CustomerCode
from .value_objects import ShippingAddress

__all__ = [
    "CustomerCode",
    "ShippingAddress",
]
