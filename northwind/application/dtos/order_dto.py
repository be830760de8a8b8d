"""Application DTOs for Order operations.

Wire payloads use camelCase field names; snake_case names are accepted
on input as well.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from northwind.domain.entities.order import to_naive_utc


class WireModel(BaseModel):
    """Base for all wire payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BriefOrder(WireModel):
    """Order header; list item and create/update request body."""

    id: int = Field(default=0, ge=0, description="Order ID (0 lets storage assign it)")
    customer_id: str = Field(..., min_length=1, description="Customer code")
    employee_id: int = Field(..., description="Employee ID")
    order_date: datetime = Field(..., description="Order date")
    required_date: datetime = Field(..., description="Required date")
    shipped_date: Optional[datetime] = Field(None, description="Shipped date")
    shipper_id: int = Field(..., description="Shipper ID")
    freight: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Freight charge"
    )
    ship_name: Optional[str] = Field(None, description="Ship name")
    ship_address: Optional[str] = Field(None, description="Ship address")
    ship_city: Optional[str] = Field(None, description="Ship city")
    ship_region: Optional[str] = Field(None, description="Ship region")
    ship_postal_code: Optional[str] = Field(None, description="Ship postal code")
    ship_country: Optional[str] = Field(None, description="Ship country")

    @field_validator("order_date", "required_date", "shipped_date")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Dates travel as naive UTC; offsets are applied, then dropped."""
        return to_naive_utc(value)


class CustomerDTO(WireModel):
    """Customer snapshot."""

    code: str
    company_name: str = ""


class EmployeeDTO(WireModel):
    """Employee snapshot."""

    id: int
    first_name: str = ""
    last_name: str = ""
    country: str = ""


class ShipperDTO(WireModel):
    """Shipper snapshot."""

    id: int
    company_name: str = ""


class FullOrderDetail(WireModel):
    """Order line with product snapshot."""

    product_id: int
    product_name: str = ""
    category_id: int = 0
    category_name: str = ""
    supplier_id: int = 0
    supplier_company_name: str = ""
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    quantity: int = Field(..., gt=0)
    discount: float = Field(default=0.0, ge=0, lt=1)


class FullOrder(BriefOrder):
    """Single-order response with nested snapshots and line items."""

    customer: CustomerDTO
    employee: EmployeeDTO
    shipper: ShipperDTO
    order_details: List[FullOrderDetail] = Field(default_factory=list)


class AddOrderResult(WireModel):
    """Response for a created order."""

    order_id: int = Field(..., description="Assigned order ID")
