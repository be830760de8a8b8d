"""Pytest configuration and shared fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from northwind.application.services import OrderApplicationService
from northwind.data.models import (
    Base,
    CategoryModel,
    ProductModel,
    ShipperModel,
    SupplierModel,
)
from northwind.data.repositories import SqlAlchemyOrderRepository
from northwind.domain.entities import Customer, Employee, Order, OrderDetail, Product, Shipper
from northwind.domain.value_objects import CustomerCode, ShippingAddress
from northwind.infrastructure.database import create_session_factory, enable_sqlite_foreign_keys


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with foreign keys enforced."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory and seed reference rows."""
    session_factory = create_session_factory(test_engine)

    async with session_factory() as session:
        session.add_all([
            ShipperModel(shipper_id=1, company_name="Speedy Express"),
            ShipperModel(shipper_id=2, company_name="United Package"),
            CategoryModel(category_id=1, category_name="Beverages"),
            CategoryModel(category_id=2, category_name="Condiments"),
            SupplierModel(supplier_id=1, company_name="Exotic Liquids"),
            SupplierModel(supplier_id=2, company_name="New Orleans Cajun Delights"),
        ])
        await session.flush()
        session.add_all([
            ProductModel(product_id=1, product_name="Chai", category_id=1, supplier_id=1),
            ProductModel(product_id=2, product_name="Chang", category_id=1, supplier_id=1),
            ProductModel(product_id=4, product_name="Chef Anton's Cajun Seasoning", category_id=2, supplier_id=2),
        ])
        await session.commit()

    yield session_factory


@pytest.fixture
def order_repository(test_session_factory) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(test_session_factory)


@pytest.fixture
def order_service(order_repository) -> OrderApplicationService:
    return OrderApplicationService(order_repository)


@pytest.fixture
def make_order():
    """Factory for valid Order aggregates."""

    def _make_order(
        order_id: int = 0,
        customer_code: str = "ALFKI",
        company_name: str = "Alfreds Futterkiste",
        employee_id: int = 5,
        shipper_id: int = 1,
        details=(),
        **overrides,
    ) -> Order:
        values = dict(
            id=order_id,
            customer=Customer(code=CustomerCode(customer_code), company_name=company_name),
            employee=Employee(id=employee_id, first_name="Steven", last_name="Buchanan", country="UK"),
            shipper=Shipper(id=shipper_id),
            order_date=datetime(1996, 7, 4),
            required_date=datetime(1996, 8, 1),
            shipped_date=datetime(1996, 7, 16),
            freight=Decimal("32.38"),
            ship_name="Vins et alcools Chevalier",
            shipping_address=ShippingAddress(
                address="59 rue de l'Abbaye",
                city="Reims",
                postal_code="51100",
                country="France",
            ),
            order_details=details,
        )
        values.update(overrides)
        return Order(**values)

    return _make_order


@pytest.fixture
def make_detail():
    """Factory for order lines referencing seeded products."""

    def _make_detail(product_id: int = 1, quantity: int = 12, unit_price: str = "14.00", discount: float = 0.0):
        return OrderDetail(
            order_id=0,
            product=Product(id=product_id),
            unit_price=Decimal(unit_price),
            quantity=quantity,
            discount=discount,
        )

    return _make_detail
