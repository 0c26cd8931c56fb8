"""
SQLAlchemy Order and OrderProduct models
"""
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
    Index,
    text
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storefront.database import Base
from storefront.models.enums import OrderStatus, values

ACTIVE_ORDER_PREDICATE = text(f"status = '{OrderStatus.ACTIVE.value}'")


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=OrderStatus.ACTIVE.value, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    user = relationship("User", back_populates="orders")
    order_products = relationship(
        "OrderProduct",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderProduct.id"
    )
    payment = relationship(
        "Payment",
        back_populates="order",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    
    # Constraints
    __table_args__ = (
        CheckConstraint(f"status IN ({values(OrderStatus)})", name='check_order_status_valid'),
        # At most one active order per user
        Index(
            'uq_orders_user_active',
            'user_id',
            unique=True,
            postgresql_where=ACTIVE_ORDER_PREDICATE,
            sqlite_where=ACTIVE_ORDER_PREDICATE
        ),
    )
    
    @property
    def is_active(self) -> bool:
        return self.status == OrderStatus.ACTIVE.value
    
    def __repr__(self):
        return f"<Order(id={self.id}, user_id={self.user_id}, status='{self.status}')>"


class OrderProduct(Base):
    """Order line item: one product and its quantity within an order"""
    
    __tablename__ = "order_products"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(50), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    order = relationship("Order", back_populates="order_products")
    product = relationship("Product", back_populates="order_products")
    
    # Constraints
    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        UniqueConstraint('order_id', 'product_id', name='uq_order_products_order_product'),
    )
    
    def __repr__(self):
        return f"<OrderProduct(id={self.id}, order_id={self.order_id}, product_id='{self.product_id}', quantity={self.quantity})>"
