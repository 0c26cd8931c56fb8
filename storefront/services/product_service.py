"""
Product Service - Business Logic Layer
"""
from typing import Iterable, List, Optional

import structlog
from sqlalchemy.orm import Session

from storefront.exceptions import ConflictError
from storefront.models.enums import ProductCategory
from storefront.models.product import Product
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse
)

logger = structlog.get_logger(__name__)


class ProductService:
    """Service layer for the product catalog"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRepository(db)
        self.orders = OrderRepository(db)
    
    def get_all_products(
        self,
        skip: int = 0,
        limit: int = 100,
        category: Optional[ProductCategory] = None
    ) -> ProductListResponse:
        """Get products with pagination, optionally within one category"""
        products = self.repository.get_all(skip=skip, limit=limit, category=category)
        total = self.repository.count(category=category)
        
        return ProductListResponse(
            products=[ProductResponse.model_validate(p) for p in products],
            total=total
        )
    
    def get_featured_products(self) -> List[ProductResponse]:
        """Get new products for the storefront highlights"""
        return [ProductResponse.model_validate(p) for p in self.repository.get_new()]
    
    def get_product_by_id(self, product_id: str) -> Optional[ProductResponse]:
        """Get product by ID"""
        product = self.repository.get_by_id(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def resolve_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        """Return exactly the subset of ``product_ids`` that exists"""
        return self.repository.resolve_by_ids(product_ids)
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """
        Create new product
        
        Raises:
            ConflictError: If a product with the same ID exists
        """
        if self.repository.get_by_id(product_data.id):
            raise ConflictError(f"Product with id={product_data.id} already exists")
        product = self.repository.create(product_data)
        logger.info("product.created", product_id=product.id)
        return ProductResponse.model_validate(product)
    
    def update_product(self, product_id: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Update existing product"""
        product = self.repository.update(product_id, product_data)
        if not product:
            return None
        logger.info("product.updated", product_id=product_id)
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: str) -> bool:
        """
        Delete product

        Line items referencing it are removed by cascade. Orders whose only
        item was this product would be left empty, so they are deleted in the
        same transaction.
        """
        try:
            emptied = self.orders.find_orders_only_containing(product_id)
            emptied_ids = [order.id for order in emptied]
            for order in emptied:
                self.orders.delete(order)
            deleted = self.repository.delete(product_id)
        except Exception:
            self.db.rollback()
            raise

        if deleted:
            logger.info(
                "product.deleted",
                product_id=product_id,
                emptied_orders=emptied_ids
            )
        return deleted
