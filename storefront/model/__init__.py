# ------ storefront/model/__init__.py ------

from .product import Product
from .order import Order, OrderItem, ORDER_STATUSES, PAYMENT_METHODS

__all__ = [
    "Product",
    "Order",
    "OrderItem",
    "ORDER_STATUSES",
    "PAYMENT_METHODS",
]
