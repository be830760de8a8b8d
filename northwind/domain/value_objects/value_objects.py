"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShippingAddress:
    """
    Immutable destination of an order.

    Every part is optional in storage; the domain keeps unknown parts
    as empty strings, never None.
    """
    address: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""

    def __post_init__(self):
        for name in ("address", "city", "region", "postal_code", "country"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")

