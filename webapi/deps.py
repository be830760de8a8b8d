"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from northwind.application.services import OrderApplicationService  # noqa: E402
from northwind.data.repositories import SqlAlchemyOrderRepository  # noqa: E402
from northwind.domain.repositories import OrderRepository  # noqa: E402
from northwind.infrastructure.database import get_session_factory  # noqa: E402
from northwind.settings import get_app_settings  # noqa: E402


def get_order_repository() -> OrderRepository:
    """Get OrderRepository instance bound to the process-wide session factory.

    Returns:
        SqlAlchemyOrderRepository instance
    """
    settings = get_app_settings().database
    return SqlAlchemyOrderRepository(
        get_session_factory(),
        cascade_order_details=settings.cascade_order_details,
    )


def get_order_service(
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(repository)
