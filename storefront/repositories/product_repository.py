"""
Product Repository - Data Access Layer
"""
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from storefront.models.product import Product
from storefront.models.enums import ProductCategory
from storefront.schemas.product import ProductCreate, ProductUpdate


class ProductRepository:
    """Repository for Product CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def _filtered(self, category: Optional[ProductCategory] = None):
        query = self.db.query(Product)
        if category is not None:
            query = query.filter(Product.category == category.value)
        return query
    
    def get_all(self, skip: int = 0, limit: int = 100, category: Optional[ProductCategory] = None) -> List[Product]:
        """Get products ordered by name, with pagination"""
        return self._filtered(category).order_by(Product.product_name).offset(skip).limit(limit).all()
    
    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def resolve_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        """Get the products that exist among ``product_ids`` in one query"""
        ids = set(product_ids)
        if not ids:
            return []
        return self.db.query(Product).filter(Product.id.in_(ids)).all()
    
    def get_new(self) -> List[Product]:
        """Get products flagged as new, ordered by name"""
        return self.db.query(Product).filter(Product.is_new.is_(True)).order_by(Product.product_name).all()
    
    def count(self, category: Optional[ProductCategory] = None) -> int:
        """Get total count of products"""
        return self._filtered(category).count()
    
    def create(self, product_data: ProductCreate) -> Product:
        """Create new product"""
        product = Product(**product_data.model_dump(mode="json"))
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def update(self, product_id: str, product_data: ProductUpdate) -> Optional[Product]:
        """Update existing product"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        # Update only provided fields
        update_data = product_data.model_dump(mode="json", exclude_unset=True)
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def delete(self, product_id: str) -> bool:
        """Delete product"""
        product = self.get_by_id(product_id)
        if not product:
            return False
        
        self.db.delete(product)
        self.db.commit()
        return True
