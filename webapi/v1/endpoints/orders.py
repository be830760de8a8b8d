"""Order endpoints for REST API."""

import logging
from typing import List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from northwind.application.dtos import AddOrderResult, BriefOrder, FullOrder
from northwind.application.services import OrderApplicationService
from northwind.data.repositories import MAX_PAGE_BOUND
from northwind.domain.errors import OrderError, OrderErrorKind
from northwind.settings import get_app_settings

from webapi.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])

_STATUS_BY_KIND = {
    OrderErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OrderErrorKind.INVALID_RANGE: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.INVALID_ORDER: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.REPOSITORY_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    OrderErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _raise_for_error(error: OrderError) -> NoReturn:
    """Translate an OrderError into an HTTPException.

    Client errors carry the message; server errors stay opaque.
    """
    status_code = _STATUS_BY_KIND[error.kind]
    if error.kind.is_client_error:
        logger.warning(f"Order request rejected [{status_code}]: {error}")
        raise HTTPException(status_code=status_code, detail=error.message)

    logger.error(f"❌ Order request failed [{status_code}]: {error}", exc_info=error.cause)
    raise HTTPException(status_code=status_code, detail="Internal server error")


@router.get("/{order_id}", response_model=FullOrder)
async def get_order(
    order_id: int,
    service: OrderApplicationService = Depends(get_order_service),
) -> FullOrder:
    """Get order by ID, including customer, employee, shipper and line items.

    Raises:
        HTTPException: 404 if the order does not exist
    """
    result = await service.get_order(order_id)
    if not result.is_ok:
        _raise_for_error(result.error)
    return result.value


@router.get("", response_model=List[BriefOrder])
async def list_orders(
    skip: int = Query(default=0, le=MAX_PAGE_BOUND, description="Number of orders to skip"),
    count: Optional[int] = Query(
        default=None,
        le=MAX_PAGE_BOUND,
        description="Maximum number of orders (defaults to API_DEFAULT_PAGE_SIZE)",
    ),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[BriefOrder]:
    """List brief orders ordered by ID.

    Args:
        skip: Offset into the ordered sequence (>= 0)
        count: Page size (> 0); the configured default page size when omitted
        service: OrderApplicationService instance

    Raises:
        HTTPException: 400 on an invalid range
    """
    if count is None:
        count = get_app_settings().api.default_page_size

    result = await service.list_orders(skip, count)
    if not result.is_ok:
        _raise_for_error(result.error)
    return result.value


@router.post("", response_model=AddOrderResult, status_code=status.HTTP_201_CREATED)
async def add_order(
    order: BriefOrder,
    request: Request,
    response: Response,
    service: OrderApplicationService = Depends(get_order_service),
) -> AddOrderResult:
    """Create a new order.

    Args:
        order: BriefOrder payload; id 0 lets storage assign it
        request: Incoming request, used to build the Location header
        response: Outgoing response
        service: OrderApplicationService instance

    Returns:
        AddOrderResult with the assigned order ID

    Raises:
        HTTPException: 400 for a malformed order
    """
    result = await service.add_order(order)
    if not result.is_ok:
        _raise_for_error(result.error)

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.value.order_id}"
    return result.value


@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_order(
    order_id: int,
    order: BriefOrder,
    service: OrderApplicationService = Depends(get_order_service),
) -> Response:
    """Replace the header of an existing order.

    Raises:
        HTTPException: 400 for a malformed order or mismatched ID, 404 if missing
    """
    result = await service.update_order(order_id, order)
    if not result.is_ok:
        _raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_order(
    order_id: int,
    service: OrderApplicationService = Depends(get_order_service),
) -> Response:
    """Delete an order.

    Raises:
        HTTPException: 404 if the order does not exist
    """
    result = await service.remove_order(order_id)
    if not result.is_ok:
        _raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
