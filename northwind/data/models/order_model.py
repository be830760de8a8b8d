"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Numeric, SmallInteger, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(String(5), ForeignKey("customers.customer_id"), nullable=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.employee_id"), nullable=False, index=True)
    order_date = Column(DateTime, nullable=False)
    required_date = Column(DateTime, nullable=False)
    shipped_date = Column(DateTime, nullable=True)
    ship_via = Column(Integer, ForeignKey("shippers.shipper_id"), nullable=False, index=True)
    freight = Column(Numeric(10, 2), nullable=False, default=0)
    ship_name = Column(String(40), nullable=True)
    ship_address = Column(String(60), nullable=True)
    ship_city = Column(String(15), nullable=True)
    ship_region = Column(String(15), nullable=True)
    ship_postal_code = Column(String(10), nullable=True)
    ship_country = Column(String(15), nullable=True)

    # Relationships
    customer = relationship("CustomerModel")
    employee = relationship("EmployeeModel")
    shipper = relationship("ShipperModel")
    # Detail rows are removed by the persistence adapter, never by the ORM
    details = relationship(
        "OrderDetailModel",
        back_populates="order",
        order_by="OrderDetailModel.product_id",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<OrderModel(order_id={self.order_id}, customer_id={self.customer_id})>"


class OrderDetailModel(Base):
    """SQLAlchemy ORM model for order_details table (composite key)."""

    __tablename__ = "order_details"

    order_id = Column(Integer, ForeignKey("orders.order_id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), primary_key=True)
    unit_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(SmallInteger, nullable=False)
    discount = Column(Float, nullable=False, default=0.0)

    # Relationships
    order = relationship("OrderModel", back_populates="details")
    product = relationship("ProductModel")

    def __repr__(self):
        return f"<OrderDetailModel(order_id={self.order_id}, product_id={self.product_id})>"
