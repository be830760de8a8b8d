from northwind.application.dtos.order_dto import (
    AddOrderResult,
    BriefOrder,
    CustomerDTO,
    EmployeeDTO,
    FullOrder,
    FullOrderDetail,
    ShipperDTO,
)

__all__ = [
    "AddOrderResult",
    "BriefOrder",
    "CustomerDTO",
    "EmployeeDTO",
    "FullOrder",
    "FullOrderDetail",
    "ShipperDTO",
]
