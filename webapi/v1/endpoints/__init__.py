from webapi.v1.endpoints import orders

__all__ = ["orders"]
