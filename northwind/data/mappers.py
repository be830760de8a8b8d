"""Static mappers for domain entities ↔ database models.

Optional text columns are coalesced to empty strings on the way into the
domain. Mapping performs no I/O: relationships must be loaded by the caller.
"""

from decimal import Decimal
from typing import Optional

from northwind.domain.entities import Customer, Employee, Order, OrderDetail, Product, Shipper
from northwind.domain.value_objects import CustomerCode, ShippingAddress

from .models import (
    CustomerModel,
    EmployeeModel,
    OrderDetailModel,
    OrderModel,
    ProductModel,
    ShipperModel,
)


def _text(value: Optional[str]) -> str:
    return value or ""


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(customer_id: str, model: Optional[CustomerModel]) -> Customer:
        return Customer(
            code=CustomerCode(value=customer_id),
            company_name=_text(model.company_name if model else None),
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        return CustomerModel(
            customer_id=entity.code.value,
            company_name=entity.company_name,
        )

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        model.company_name = entity.company_name
        return model


class EmployeeMapper:
    """Static mapper for Employee ↔ EmployeeModel transformation."""

    @staticmethod
    def to_domain(employee_id: int, model: Optional[EmployeeModel]) -> Employee:
        if model is None:
            return Employee(id=employee_id)
        return Employee(
            id=employee_id,
            first_name=_text(model.first_name),
            last_name=_text(model.last_name),
            country=_text(model.country),
        )

    @staticmethod
    def to_persistence(entity: Employee) -> EmployeeModel:
        return EmployeeModel(
            employee_id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            country=entity.country,
        )

    @staticmethod
    def update_persistence(entity: Employee, model: EmployeeModel) -> EmployeeModel:
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.country = entity.country
        return model


class ShipperMapper:
    """Static mapper for ShipperModel → Shipper."""

    @staticmethod
    def to_domain(shipper_id: int, model: Optional[ShipperModel]) -> Shipper:
        return Shipper(
            id=shipper_id,
            company_name=_text(model.company_name if model else None),
        )


class ProductMapper:
    """Static mapper for ProductModel (with category and supplier) → Product."""

    @staticmethod
    def to_domain(product_id: int, model: Optional[ProductModel]) -> Product:
        if model is None:
            return Product(id=product_id)
        return Product(
            id=product_id,
            product_name=_text(model.product_name),
            category_id=model.category_id or 0,
            category_name=_text(model.category.category_name if model.category else None),
            supplier_id=model.supplier_id or 0,
            supplier_company_name=_text(model.supplier.company_name if model.supplier else None),
        )


class OrderDetailMapper:
    """Static mapper for OrderDetail ↔ OrderDetailModel transformation."""

    @staticmethod
    def to_domain(model: OrderDetailModel) -> OrderDetail:
        """Convert ORM model to domain entity.

        Args:
            model: OrderDetailModel with its product loaded

        Returns:
            OrderDetail domain entity
        """
        return OrderDetail(
            order_id=model.order_id,
            product=ProductMapper.to_domain(model.product_id, model.product),
            unit_price=Decimal(str(model.unit_price)),
            quantity=model.quantity,
            discount=float(model.discount or 0.0),
        )

    @staticmethod
    def to_persistence(entity: OrderDetail, order_id: int) -> OrderDetailModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderDetail domain entity
            order_id: Identity of the owning order (composite key part)

        Returns:
            OrderDetailModel instance
        """
        return OrderDetailModel(
            order_id=order_id,
            product_id=entity.product_id,
            unit_price=entity.unit_price,
            quantity=entity.quantity,
            discount=entity.discount,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel, with_details: bool = True) -> Order:
        """Convert ORM model to domain aggregate.

        Args:
            model: OrderModel with customer, employee and shipper loaded
            with_details: Map line items too (requires details to be loaded)

        Returns:
            Order domain aggregate

        Raises:
            ValueError: If the row has no customer id
        """
        if not model.customer_id:
            raise ValueError(f"Order {model.order_id} has no customer id")

        details = ()
        if with_details:
            details = tuple(OrderDetailMapper.to_domain(detail) for detail in model.details)

        return Order(
            id=model.order_id,
            customer=CustomerMapper.to_domain(model.customer_id, model.customer),
            employee=EmployeeMapper.to_domain(model.employee_id, model.employee),
            shipper=ShipperMapper.to_domain(model.ship_via, model.shipper),
            order_date=model.order_date,
            required_date=model.required_date,
            shipped_date=model.shipped_date,
            freight=Decimal(str(model.freight if model.freight is not None else 0)),
            ship_name=_text(model.ship_name),
            shipping_address=ShippingAddress(
                address=_text(model.ship_address),
                city=_text(model.ship_city),
                region=_text(model.ship_region),
                postal_code=_text(model.ship_postal_code),
                country=_text(model.ship_country),
            ),
            order_details=details,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to a header row (line items excluded).

        Args:
            entity: Order domain aggregate; id 0 leaves the key to storage

        Returns:
            OrderModel instance
        """
        model = OrderModel()
        if entity.id:
            model.order_id = entity.id
        return OrderMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Overwrite every mutable header column from the domain aggregate.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        address = entity.shipping_address
        model.customer_id = entity.customer.code.value
        model.employee_id = entity.employee.id
        model.order_date = entity.order_date
        model.required_date = entity.required_date
        model.shipped_date = entity.shipped_date
        model.ship_via = entity.shipper.id
        model.freight = entity.freight
        model.ship_name = entity.ship_name
        model.ship_address = address.address
        model.ship_city = address.city
        model.ship_region = address.region
        model.ship_postal_code = address.postal_code
        model.ship_country = address.country
        return model
