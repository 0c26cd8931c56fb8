"""
SQLAlchemy Product model
"""
from sqlalchemy import Column, String, Numeric, DateTime, Boolean, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storefront.database import Base
from storefront.models.enums import ProductCategory, values


class Product(Base):
    """Product database model"""
    
    __tablename__ = "products"
    
    id = Column(String(50), primary_key=True)  # slug, e.g. "xx99-mark-two"
    product_name = Column(String(100), nullable=False, index=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    product_desc = Column(String(250), nullable=True)
    image_name = Column(String(255), nullable=False)
    product_features = Column(JSON, nullable=True)
    product_accessories = Column(JSON, nullable=True)
    is_new = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    # Removing a product removes the line items that reference it
    order_products = relationship(
        "OrderProduct",
        back_populates="product",
        cascade="save-update, merge, delete",
        passive_deletes=True
    )
    
    # Constraints
    __table_args__ = (
        CheckConstraint('price > 0', name='check_price_positive'),
        CheckConstraint(f"category IN ({values(ProductCategory)})", name='check_category_valid'),
    )
    
    def __repr__(self):
        return f"<Product(id='{self.id}', product_name='{self.product_name}', price={self.price})>"
