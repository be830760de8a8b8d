"""
Persistence schema adapter.

Translates between the Order aggregate and rows of the orders,
order_details, customers, employees, shippers and products tables
through one SQLAlchemy session. Commit is handled by the Unit of Work.
"""
from typing import List, Optional
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from northwind.domain.entities import Customer, Employee, Order

from .mappers import CustomerMapper, EmployeeMapper, OrderDetailMapper, OrderMapper
from .models import (
    CustomerModel,
    EmployeeModel,
    OrderDetailModel,
    OrderModel,
    ProductModel,
)


logger = logging.getLogger(__name__)


_REFERENCE_OPTIONS = (
    selectinload(OrderModel.customer),
    selectinload(OrderModel.employee),
    selectinload(OrderModel.shipper),
)

_DETAIL_OPTIONS = (
    selectinload(OrderModel.details)
    .selectinload(OrderDetailModel.product)
    .selectinload(ProductModel.category),
    selectinload(OrderModel.details)
    .selectinload(OrderDetailModel.product)
    .selectinload(ProductModel.supplier),
)


class OrderSchemaAdapter:
    """
    Session-bound adapter for the Order aggregate.

    Storage exceptions are never caught here; they propagate to the
    repository which reports them.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize adapter with database session.

        Args:
            session: SQLAlchemy async session owned by the current unit of work
        """
        self.session = session

    # =========================================================================
    # READS
    # =========================================================================

    async def find_order(self, order_id: int, with_details: bool = True) -> Optional[Order]:
        """
        Load one order.

        Args:
            order_id: Order identity
            with_details: Also load line items with product snapshots

        Returns:
            Order if found, None otherwise
        """
        stmt = select(OrderModel).options(*_REFERENCE_OPTIONS).where(OrderModel.order_id == order_id)
        if with_details:
            stmt = stmt.options(*_DETAIL_OPTIONS)

        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            logger.debug(f"Order row not found: {order_id}")
            return None

        return OrderMapper.to_domain(model, with_details=with_details)

    async def find_page(self, skip: int, count: int) -> List[Order]:
        """
        Load a page of orders ascending by identity, without line items.

        Args:
            skip: Number of rows to skip
            count: Maximum number of rows

        Returns:
            List of brief Order aggregates
        """
        result = await self.session.execute(
            select(OrderModel)
            .options(*_REFERENCE_OPTIONS)
            .order_by(OrderModel.order_id)
            .offset(skip)
            .limit(count)
        )
        models = result.scalars().all()

        return [OrderMapper.to_domain(model, with_details=False) for model in models]

    async def exists(self, order_id: int) -> bool:
        """
        Check if an order header row exists.

        Args:
            order_id: Order identity

        Returns:
            True if exists, False otherwise
        """
        result = await self.session.execute(
            select(OrderModel.order_id).where(OrderModel.order_id == order_id)
        )
        return result.scalar_one_or_none() is not None

    # =========================================================================
    # WRITES
    # =========================================================================

    async def upsert_customer(self, customer: Customer) -> None:
        """Insert the customer or re-assert its company name."""
        existing = await self.session.get(CustomerModel, customer.code.value)

        if existing:
            CustomerMapper.update_persistence(customer, existing)
        else:
            self.session.add(CustomerMapper.to_persistence(customer))
            logger.info(f"Creating customer: {customer.code.value}")

        await self.session.flush()

    async def upsert_employee(self, employee: Employee) -> None:
        """Insert the employee or re-assert its name and country."""
        existing = await self.session.get(EmployeeModel, employee.id)

        if existing:
            EmployeeMapper.update_persistence(employee, existing)
        else:
            self.session.add(EmployeeMapper.to_persistence(employee))
            logger.info(f"Creating employee: {employee.id} ({employee.full_name})")

        await self.session.flush()

    async def insert_order(self, order: Order) -> int:
        """
        Insert the header row and any line items.

        Args:
            order: Order aggregate; id 0 lets storage assign the identity

        Returns:
            Identity of the inserted order
        """
        order_model = OrderMapper.to_persistence(order)
        self.session.add(order_model)
        await self.session.flush()

        order_id = order_model.order_id

        for detail in order.order_details:
            self.session.add(OrderDetailMapper.to_persistence(detail, order_id))

        if order.order_details:
            await self.session.flush()

        return order_id

    async def overwrite_order(self, order: Order) -> bool:
        """
        Overwrite every mutable header column. Line items are untouched.

        Args:
            order: Order aggregate carrying an existing identity

        Returns:
            True if a row was overwritten, False if it does not exist
        """
        existing = await self.session.get(OrderModel, order.id)

        if existing is None:
            return False

        OrderMapper.update_persistence(order, existing)
        await self.session.flush()
        return True

    async def delete_order(self, order_id: int, cascade_details: bool = True) -> None:
        """
        Delete an order header.

        Args:
            order_id: Order identity
            cascade_details: Delete the order's detail rows first. When False,
                remaining detail rows make the foreign key reject the delete.
        """
        if cascade_details:
            result = await self.session.execute(
                delete(OrderDetailModel).where(OrderDetailModel.order_id == order_id)
            )
            logger.debug(f"Deleted {result.rowcount} detail row(s) of order {order_id}")

        await self.session.execute(delete(OrderModel).where(OrderModel.order_id == order_id))
