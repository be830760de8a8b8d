"""Application service for Order operations."""

from typing import List
import logging

from northwind.application.dtos.order_dto import (
    AddOrderResult,
    BriefOrder,
    CustomerDTO,
    EmployeeDTO,
    FullOrder,
    FullOrderDetail,
    ShipperDTO,
)
from northwind.domain.entities import Customer, Employee, Order, Shipper
from northwind.domain.errors import OrderErrorKind, Result
from northwind.domain.repositories import OrderRepository
from northwind.domain.value_objects import CustomerCode, ShippingAddress


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Transform between wire DTOs and domain entities
    - Delegate persistence to the OrderRepository
    - Pass Result values through so callers branch on the error kind
    """

    def __init__(self, repository: OrderRepository) -> None:
        """Initialize order application service.

        Args:
            repository: OrderRepository implementation
        """
        self._repository = repository

    async def get_order(self, order_id: int) -> Result[FullOrder]:
        """Get one order with nested snapshots and line items."""
        result = await self._repository.get_order(order_id)
        return result.map(self._order_to_full)

    async def list_orders(self, skip: int, count: int) -> Result[List[BriefOrder]]:
        """List brief orders ascending by identity."""
        result = await self._repository.list_orders(skip, count)
        return result.map(lambda orders: [self._order_to_brief(order) for order in orders])

    async def add_order(self, request: BriefOrder) -> Result[AddOrderResult]:
        """Create an order from a brief payload.

        Args:
            request: BriefOrder DTO; id 0 lets storage assign the identity

        Returns:
            Result with AddOrderResult, or INVALID_ORDER for a malformed payload
        """
        try:
            order = self._brief_to_order(request)
        except ValueError as e:
            return Result.failure(OrderErrorKind.INVALID_ORDER, str(e), cause=e)

        result = await self._repository.add_order(order)
        return result.map(lambda order_id: AddOrderResult(order_id=order_id))

    async def update_order(self, order_id: int, request: BriefOrder) -> Result[None]:
        """Replace the header of an existing order.

        Args:
            order_id: Identity from the request path
            request: BriefOrder DTO whose id must match order_id
        """
        if request.id != order_id:
            logger.warning(f"Order id mismatch: path={order_id}, body={request.id}")
            return Result.failure(
                OrderErrorKind.INVALID_ORDER,
                f"Order id in body ({request.id}) does not match path ({order_id})",
            )

        try:
            order = self._brief_to_order(request)
        except ValueError as e:
            return Result.failure(OrderErrorKind.INVALID_ORDER, str(e), cause=e)

        return await self._repository.update_order(order)

    async def remove_order(self, order_id: int) -> Result[None]:
        """Delete an order."""
        return await self._repository.remove_order(order_id)

    def _brief_to_order(self, request: BriefOrder) -> Order:
        """Transform BriefOrder DTO to Order domain entity.

        Snapshots carry only their identities; every write re-asserts them.

        Raises:
            ValueError: If the payload violates a domain invariant
        """
        return Order(
            id=request.id,
            customer=Customer(code=CustomerCode(value=request.customer_id)),
            employee=Employee(id=request.employee_id),
            shipper=Shipper(id=request.shipper_id),
            order_date=request.order_date,
            required_date=request.required_date,
            shipped_date=request.shipped_date,
            freight=request.freight,
            ship_name=request.ship_name or "",
            shipping_address=ShippingAddress(
                address=request.ship_address or "",
                city=request.ship_city or "",
                region=request.ship_region or "",
                postal_code=request.ship_postal_code or "",
                country=request.ship_country or "",
            ),
        )

    def _order_to_brief(self, order: Order) -> BriefOrder:
        """Transform Order domain entity to BriefOrder."""
        return BriefOrder(**self._header_fields(order))

    def _order_to_full(self, order: Order) -> FullOrder:
        """Transform Order domain entity to FullOrder."""
        details = [
            FullOrderDetail(
                product_id=detail.product.id,
                product_name=detail.product.product_name,
                category_id=detail.product.category_id,
                category_name=detail.product.category_name,
                supplier_id=detail.product.supplier_id,
                supplier_company_name=detail.product.supplier_company_name,
                unit_price=detail.unit_price,
                quantity=detail.quantity,
                discount=detail.discount,
            )
            for detail in order.order_details
        ]

        return FullOrder(
            **self._header_fields(order),
            customer=CustomerDTO(
                code=order.customer.code.value,
                company_name=order.customer.company_name,
            ),
            employee=EmployeeDTO(
                id=order.employee.id,
                first_name=order.employee.first_name,
                last_name=order.employee.last_name,
                country=order.employee.country,
            ),
            shipper=ShipperDTO(
                id=order.shipper.id,
                company_name=order.shipper.company_name,
            ),
            order_details=details,
        )

    @staticmethod
    def _header_fields(order: Order) -> dict:
        address = order.shipping_address
        return {
            "id": order.id,
            "customer_id": order.customer.code.value,
            "employee_id": order.employee.id,
            "order_date": order.order_date,
            "required_date": order.required_date,
            "shipped_date": order.shipped_date,
            "shipper_id": order.shipper.id,
            "freight": order.freight,
            "ship_name": order.ship_name,
            "ship_address": address.address,
            "ship_city": address.city,
            "ship_region": address.region,
            "ship_postal_code": address.postal_code,
            "ship_country": address.country,
        }
