"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Employee, Order, OrderDetail, Product, Shipper
from .errors import OrderError, OrderErrorKind, OrderRepositoryError, Result
from .repositories import OrderRepository
from .value_objects import CustomerCode, ShippingAddress

__all__ = [
    "Customer",
    "CustomerCode",
    "Employee",
    "Order",
    "OrderDetail",
    "OrderError",
    "OrderErrorKind",
    "OrderRepository",
    "OrderRepositoryError",
    "Product",
    "Result",
    "Shipper",
    "ShippingAddress",
]
