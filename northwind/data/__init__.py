"""Data layer - infrastructure persistence and mapping."""

from .adapter import OrderSchemaAdapter
from .mappers import (
    CustomerMapper,
    EmployeeMapper,
    OrderDetailMapper,
    OrderMapper,
    ProductMapper,
    ShipperMapper,
)
from .models import Base, OrderDetailModel, OrderModel
from .repositories import SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "CustomerMapper",
    "EmployeeMapper",
    "OrderDetailMapper",
    "OrderDetailModel",
    "OrderMapper",
    "OrderModel",
    "OrderSchemaAdapter",
    "ProductMapper",
    "ShipperMapper",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
