"""SQLAlchemy implementation of OrderRepository."""

from typing import List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from northwind.domain.entities import Order
from northwind.domain.errors import OrderErrorKind, Result
from northwind.domain.repositories import OrderRepository

from ..uow import create_uow


logger = logging.getLogger(__name__)

# Largest offset or page size the storage engines accept as a bound parameter
MAX_PAGE_BOUND = 2**63 - 1


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Every operation opens its own unit of work. Validation runs in two
    phases: precondition checks before any I/O, then existence checks
    through a read inside the unit of work. Nothing is retried.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        cascade_order_details: bool = True,
    ) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
            cascade_order_details: remove_order also deletes detail rows
        """
        self._session_factory = session_factory
        self._cascade_order_details = cascade_order_details

    async def get_order(self, order_id: int) -> Result[Order]:
        try:
            async with create_uow(self._session_factory) as uow:
                order = await uow.orders.find_order(order_id, with_details=True)
        except SQLAlchemyError as e:
            return self._storage_failure("retrieving order", e)
        except Exception as e:
            return self._unexpected_failure("retrieving order", e)

        if order is None:
            return self._not_found(order_id)

        return Result.success(order)

    async def list_orders(self, skip: int, count: int) -> Result[List[Order]]:
        if not (0 <= skip <= MAX_PAGE_BOUND and 0 < count <= MAX_PAGE_BOUND):
            return Result.failure(
                OrderErrorKind.INVALID_RANGE,
                f"skip must be >= 0 and count > 0, both at most {MAX_PAGE_BOUND} "
                f"(got skip={skip}, count={count})",
            )

        try:
            async with create_uow(self._session_factory) as uow:
                orders = await uow.orders.find_page(skip, count)
        except SQLAlchemyError as e:
            return self._storage_failure("listing orders", e)
        except Exception as e:
            return self._unexpected_failure("listing orders", e)

        logger.info(f"Found {len(orders)} order(s) (skip={skip}, count={count})")
        return Result.success(orders)

    async def add_order(self, order: Order) -> Result[int]:
        invalid = self._validate_order(order)
        if invalid:
            return invalid

        try:
            async with create_uow(self._session_factory) as uow:
                await uow.orders.upsert_customer(order.customer)
                await uow.orders.upsert_employee(order.employee)
                order_id = await uow.orders.insert_order(order)
                await uow.commit()
        except SQLAlchemyError as e:
            return self._storage_failure("adding order", e)
        except Exception as e:
            return self._unexpected_failure("adding order", e)

        logger.info(f"✅ Added order: {order_id}")
        return Result.success(order_id)

    async def update_order(self, order: Order) -> Result[None]:
        invalid = self._validate_order(order)
        if invalid:
            return invalid
        if order.id <= 0:
            return Result.failure(
                OrderErrorKind.INVALID_ORDER, "Order to update must carry an identity"
            )

        try:
            async with create_uow(self._session_factory) as uow:
                if not await uow.orders.exists(order.id):
                    return self._not_found(order.id)

                await uow.orders.upsert_customer(order.customer)
                await uow.orders.upsert_employee(order.employee)
                if not await uow.orders.overwrite_order(order):
                    return self._not_found(order.id)

                await uow.commit()
        except SQLAlchemyError as e:
            return self._storage_failure("updating order", e)
        except Exception as e:
            return self._unexpected_failure("updating order", e)

        logger.info(f"✅ Updated order: {order.id}")
        return Result.success()

    async def remove_order(self, order_id: int) -> Result[None]:
        try:
            async with create_uow(self._session_factory) as uow:
                if not await uow.orders.exists(order_id):
                    return self._not_found(order_id)

                await uow.orders.delete_order(
                    order_id, cascade_details=self._cascade_order_details
                )
                await uow.commit()
        except SQLAlchemyError as e:
            return self._storage_failure("removing order", e)
        except Exception as e:
            return self._unexpected_failure("removing order", e)

        logger.info(f"✅ Removed order: {order_id}")
        return Result.success()

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    @staticmethod
    def _validate_order(order: Optional[Order]) -> Optional[Result]:
        """Cheap structural check performed before any I/O."""
        if order is None:
            return Result.failure(OrderErrorKind.INVALID_ORDER, "Order cannot be null")

        missing = []
        if order.customer is None or order.customer.code is None:
            missing.append("customer code")
        if order.employee is None or order.employee.id <= 0:
            missing.append("employee id")
        if order.shipper is None or order.shipper.id <= 0:
            missing.append("shipper id")

        if missing:
            return Result.failure(
                OrderErrorKind.INVALID_ORDER,
                f"Order is missing: {', '.join(missing)}",
            )
        return None

    @staticmethod
    def _not_found(order_id: int) -> Result:
        logger.info(f"Order not found: {order_id}")
        return Result.failure(OrderErrorKind.NOT_FOUND, f"Order {order_id} not found")

    @staticmethod
    def _storage_failure(operation: str, error: Exception) -> Result:
        logger.error(f"❌ Error {operation}: {error}", exc_info=error)
        return Result.failure(
            OrderErrorKind.REPOSITORY_FAILURE, f"Error {operation}", cause=error
        )

    @staticmethod
    def _unexpected_failure(operation: str, error: Exception) -> Result:
        logger.error(f"❌ Unexpected error {operation}: {error}", exc_info=error)
        return Result.failure(
            OrderErrorKind.UNEXPECTED, f"Unexpected error {operation}", cause=error
        )
