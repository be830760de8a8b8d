from northwind.application.services.order_service import OrderApplicationService

__all__ = ["OrderApplicationService"]
