"""Domain entities."""

from .order import Order, OrderDetail
from .snapshots import Customer, Employee, Product, Shipper

__all__ = [
    "Customer",
    "Employee",
    "Order",
    "OrderDetail",
    "Product",
    "Shipper",
]
