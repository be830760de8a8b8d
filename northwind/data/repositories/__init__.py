"""Repository implementations."""

from .order_repository_impl import MAX_PAGE_BOUND, SqlAlchemyOrderRepository

__all__ = ["MAX_PAGE_BOUND", "SqlAlchemyOrderRepository"]
