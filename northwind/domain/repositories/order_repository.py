"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order
from ..errors import Result


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence.

    Every operation is one unit of work against storage and reports
    failures through the returned Result.
    """

    @abstractmethod
    async def get_order(self, order_id: int) -> Result[Order]:
        """Retrieve one order with customer, employee, shipper and line items.

        Args:
            order_id: Order identity

        Returns:
            Result with the Order, or NOT_FOUND
        """
        pass

    @abstractmethod
    async def list_orders(self, skip: int, count: int) -> Result[List[Order]]:
        """List orders ascending by identity, without line items.

        Args:
            skip: Number of orders to skip (>= 0)
            count: Maximum number of orders to return (> 0)

        Returns:
            Result with the page, or INVALID_RANGE
        """
        pass

    @abstractmethod
    async def add_order(self, order: Order) -> Result[int]:
        """Persist a new order.

        Args:
            order: Order aggregate; id 0 lets storage assign the identity

        Returns:
            Result with the assigned identity
        """
        pass

    @abstractmethod
    async def update_order(self, order: Order) -> Result[None]:
        """Replace the header of an existing order. Line items are untouched.

        Args:
            order: Order aggregate carrying an existing identity

        Returns:
            Empty Result, or NOT_FOUND
        """
        pass

    @abstractmethod
    async def remove_order(self, order_id: int) -> Result[None]:
        """Delete an order.

        Args:
            order_id: Order identity

        Returns:
            Empty Result, or NOT_FOUND
        """
        pass
