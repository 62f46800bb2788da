# tiffincrm/repositories/__init__.py
from .customers import CustomerRepository
from .menu import MenuRepository
from .orders import OrderRepository

__all__ = ["CustomerRepository", "MenuRepository", "OrderRepository"]
