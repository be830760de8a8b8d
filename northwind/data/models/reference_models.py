"""SQLAlchemy ORM models for the tables an order references."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, SmallInteger, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class CustomerModel(Base):
    """SQLAlchemy ORM model for customers table."""

    __tablename__ = "customers"

    customer_id = Column(String(5), primary_key=True)
    company_name = Column(String(40), nullable=True)
    contact_name = Column(String(30), nullable=True)
    city = Column(String(15), nullable=True)
    country = Column(String(15), nullable=True)

    def __repr__(self):
        return f"<CustomerModel(customer_id={self.customer_id}, company_name={self.company_name})>"


class EmployeeModel(Base):
    """SQLAlchemy ORM model for employees table."""

    __tablename__ = "employees"

    employee_id = Column(Integer, primary_key=True, autoincrement=False)
    first_name = Column(String(10), nullable=False, default="")
    last_name = Column(String(20), nullable=False, default="")
    title = Column(String(30), nullable=True)
    country = Column(String(15), nullable=True)

    def __repr__(self):
        return f"<EmployeeModel(employee_id={self.employee_id}, last_name={self.last_name})>"


class ShipperModel(Base):
    """SQLAlchemy ORM model for shippers table."""

    __tablename__ = "shippers"

    shipper_id = Column(Integer, primary_key=True, autoincrement=False)
    company_name = Column(String(40), nullable=False)
    phone = Column(String(24), nullable=True)

    def __repr__(self):
        return f"<ShipperModel(shipper_id={self.shipper_id}, company_name={self.company_name})>"


class CategoryModel(Base):
    """SQLAlchemy ORM model for categories table."""

    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True, autoincrement=False)
    category_name = Column(String(15), nullable=False)
    description = Column(Text, nullable=True)


class SupplierModel(Base):
    """SQLAlchemy ORM model for suppliers table."""

    __tablename__ = "suppliers"

    supplier_id = Column(Integer, primary_key=True, autoincrement=False)
    company_name = Column(String(40), nullable=False)
    contact_name = Column(String(30), nullable=True)
    city = Column(String(15), nullable=True)
    country = Column(String(15), nullable=True)
    phone = Column(String(24), nullable=True)


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, autoincrement=False)
    product_name = Column(String(40), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.supplier_id"), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=True)
    quantity_per_unit = Column(String(20), nullable=True)
    unit_price = Column(Numeric(10, 2), nullable=True)
    units_in_stock = Column(SmallInteger, nullable=True)
    discontinued = Column(Boolean, nullable=False, default=False)

    # Relationships
    category = relationship("CategoryModel")
    supplier = relationship("SupplierModel")

    def __repr__(self):
        return f"<ProductModel(product_id={self.product_id}, product_name={self.product_name})>"
