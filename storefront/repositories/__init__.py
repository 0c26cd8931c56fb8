"""
Repositories package
"""
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.order_product_repository import OrderProductRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.user_repository import UserRepository

__all__ = ["OrderRepository", "OrderProductRepository", "ProductRepository", "UserRepository"]
