"""Unit of Work pattern for atomic transactions."""

from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .adapter import OrderSchemaAdapter


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Acquire one session per repository operation and always release it
    2. Atomic commit/rollback of everything the adapter wrote
    3. Lazy initialization of the schema adapter

    Usage:
        async with create_uow(session_factory) as uow:
            await uow.orders.upsert_customer(order.customer)
            order_id = await uow.orders.insert_order(order)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded adapter
        self._orders: Optional[OrderSchemaAdapter] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception; always close the session."""
        try:
            if exc_type is not None:
                logger.warning(f"Transaction failed, rolling back: {exc_val!r}")
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._orders = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> OrderSchemaAdapter:
        """Lazy-load the order schema adapter.

        Returns:
            OrderSchemaAdapter bound to this unit of work's session
        """
        if self._orders is None:
            self._orders = OrderSchemaAdapter(self.session)
        return self._orders

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
