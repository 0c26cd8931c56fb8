"""
Models package
"""
from storefront.models.enums import (
    OrderStatus,
    PaymentProvider,
    PaymentStatus,
    ProductCategory,
    UserRole
)
from storefront.models.user import User
from storefront.models.product import Product
from storefront.models.order import Order, OrderProduct
from storefront.models.payment import Payment

__all__ = [
    "OrderStatus",
    "PaymentProvider",
    "PaymentStatus",
    "ProductCategory",
    "UserRole",
    "User",
    "Product",
    "Order",
    "OrderProduct",
    "Payment"
]
