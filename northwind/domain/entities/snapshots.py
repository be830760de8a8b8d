"""
Denormalized snapshots referenced by the Order aggregate.

These are copies of other entities' fields embedded in an order for
display purposes. They are not live foreign keys at the domain layer.
"""
from dataclasses import dataclass

from ..value_objects import CustomerCode


@dataclass(frozen=True)
class Customer:
    """Customer snapshot identified by its natural key."""
    code: CustomerCode
    company_name: str = ""

    def __post_init__(self):
        if self.code is None:
            raise ValueError("Customer code is required")
        if self.company_name is None:
            object.__setattr__(self, "company_name", "")


@dataclass(frozen=True)
class Employee:
    """Employee snapshot."""
    id: int
    first_name: str = ""
    last_name: str = ""
    country: str = ""

    def __post_init__(self):
        for name in ("first_name", "last_name", "country"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass(frozen=True)
class Shipper:
    """Shipper snapshot."""
    id: int
    company_name: str = ""

    def __post_init__(self):
        if self.company_name is None:
            object.__setattr__(self, "company_name", "")


@dataclass(frozen=True)
class Product:
    """Product snapshot with its category and supplier names."""
    id: int
    product_name: str = ""
    category_id: int = 0
    category_name: str = ""
    supplier_id: int = 0
    supplier_company_name: str = ""
