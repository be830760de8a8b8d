"""Unit tests for domain ↔ ORM mappers (no database)."""

from datetime import datetime
from decimal import Decimal

import pytest

from northwind.data.mappers import (
    CustomerMapper,
    EmployeeMapper,
    OrderDetailMapper,
    OrderMapper,
    ProductMapper,
)
from northwind.data.models import (
    CategoryModel,
    CustomerModel,
    EmployeeModel,
    OrderDetailModel,
    OrderModel,
    ProductModel,
    ShipperModel,
    SupplierModel,
)
from northwind.domain.entities import Customer, Employee
from northwind.domain.value_objects import CustomerCode


def _order_row(**overrides) -> OrderModel:
    values = dict(
        order_id=10248,
        customer_id="VINET",
        employee_id=5,
        order_date=datetime(1996, 7, 4),
        required_date=datetime(1996, 8, 1),
        shipped_date=None,
        ship_via=3,
        freight=Decimal("32.38"),
        ship_name=None,
        ship_address="59 rue de l'Abbaye",
        ship_city="Reims",
        ship_region=None,
        ship_postal_code="51100",
        ship_country="France",
        customer=CustomerModel(customer_id="VINET", company_name=None),
        employee=EmployeeModel(employee_id=5, first_name="Steven", last_name="Buchanan"),
        shipper=ShipperModel(shipper_id=3, company_name="Federal Shipping"),
    )
    values.update(overrides)
    return OrderModel(**values)


class TestOrderMapperToDomain:
    def test_header_columns_mapped(self):
        order = OrderMapper.to_domain(_order_row(), with_details=False)

        assert order.id == 10248
        assert order.customer.code == CustomerCode("VINET")
        assert order.employee.full_name == "Steven Buchanan"
        assert order.shipper.id == 3
        assert order.shipper.company_name == "Federal Shipping"
        assert order.freight == Decimal("32.38")
        assert order.shipping_address.city == "Reims"

    def test_null_text_columns_become_empty(self):
        order = OrderMapper.to_domain(_order_row(), with_details=False)

        assert order.ship_name == ""
        assert order.shipping_address.region == ""
        assert order.customer.company_name == ""
        assert order.employee.country == ""

    def test_missing_customer_id_rejected(self):
        with pytest.raises(ValueError, match="no customer id"):
            OrderMapper.to_domain(_order_row(customer_id=None, customer=None))

    def test_unloaded_snapshots_keep_identity(self):
        order = OrderMapper.to_domain(
            _order_row(employee=None, shipper=None), with_details=False
        )

        assert order.employee.id == 5
        assert order.employee.first_name == ""
        assert order.shipper.id == 3

    def test_details_mapped_with_product_snapshot(self):
        product = ProductModel(
            product_id=11,
            product_name="Queso Cabrales",
            category_id=4,
            supplier_id=5,
            category=CategoryModel(category_id=4, category_name="Dairy Products"),
            supplier=SupplierModel(supplier_id=5, company_name="Cooperativa de Quesos"),
        )
        detail = OrderDetailModel(
            order_id=10248, product_id=11, unit_price=Decimal("14.00"),
            quantity=12, discount=0.0, product=product,
        )

        order = OrderMapper.to_domain(_order_row(details=[detail]))

        [line] = order.order_details
        assert line.key == (10248, 11)
        assert line.product.product_name == "Queso Cabrales"
        assert line.product.category_name == "Dairy Products"
        assert line.product.supplier_company_name == "Cooperativa de Quesos"
        assert line.unit_price == Decimal("14.00")


class TestOrderMapperToPersistence:
    def test_new_order_leaves_key_to_storage(self, make_order):
        model = OrderMapper.to_persistence(make_order(order_id=0))

        assert model.order_id is None
        assert model.customer_id == "ALFKI"
        assert model.ship_via == 1
        assert model.ship_region == ""

    def test_explicit_identity_kept(self, make_order):
        model = OrderMapper.to_persistence(make_order(order_id=11000))

        assert model.order_id == 11000

    def test_update_overwrites_every_header_column(self, make_order):
        model = _order_row()
        order = make_order(order_id=10248, shipped_date=None, freight=Decimal("1.50"))

        OrderMapper.update_persistence(order, model)

        assert model.order_id == 10248
        assert model.customer_id == "ALFKI"
        assert model.employee_id == 5
        assert model.ship_via == 1
        assert model.shipped_date is None
        assert model.freight == Decimal("1.50")
        assert model.ship_name == "Vins et alcools Chevalier"


class TestReferenceMappers:
    def test_customer_round_trip(self):
        customer = Customer(code=CustomerCode("ALFKI"), company_name="Alfreds Futterkiste")

        model = CustomerMapper.to_persistence(customer)

        assert CustomerMapper.to_domain(model.customer_id, model) == customer

    def test_customer_update_reasserts_company_name(self):
        model = CustomerModel(customer_id="ALFKI", company_name="Old Name", city="Berlin")

        CustomerMapper.update_persistence(
            Customer(code=CustomerCode("ALFKI"), company_name="New Name"), model
        )

        assert model.company_name == "New Name"
        assert model.city == "Berlin"

    def test_employee_update_reasserts_names(self):
        model = EmployeeModel(employee_id=5, first_name="A", last_name="B", title="Sales Manager")

        EmployeeMapper.update_persistence(
            Employee(id=5, first_name="Steven", last_name="Buchanan", country="UK"), model
        )

        assert (model.first_name, model.last_name, model.country) == ("Steven", "Buchanan", "UK")
        assert model.title == "Sales Manager"

    def test_product_without_row(self):
        product = ProductMapper.to_domain(77, None)

        assert product.id == 77
        assert product.category_name == ""

    def test_detail_to_persistence_uses_owner_identity(self, make_detail):
        model = OrderDetailMapper.to_persistence(make_detail(product_id=2, quantity=3), 10300)

        assert (model.order_id, model.product_id, model.quantity) == (10300, 2, 3)
