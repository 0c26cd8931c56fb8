"""
Order Repository - Data Access Layer

None of these methods commit: the calling service owns the transaction.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc, func, select

from storefront.models.order import Order, OrderProduct
from storefront.models.enums import OrderStatus


def _with_items():
    """Eager-load line items and their products"""
    return selectinload(Order.order_products).selectinload(OrderProduct.product)


class OrderRepository:
    """Repository for Order persistence"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get bare order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def find_active_order_for_user(self, user_id: int) -> Optional[Order]:
        """Get the user's active order, if any"""
        return self.db.query(Order).options(_with_items()).filter(
            Order.user_id == user_id,
            Order.status == OrderStatus.ACTIVE.value
        ).first()
    
    def find_completed_orders_for_user(self, user_id: int) -> List[Order]:
        """Get the user's completed orders, newest first"""
        return self.db.query(Order).options(
            _with_items(),
            selectinload(Order.payment)
        ).filter(
            Order.user_id == user_id,
            Order.status == OrderStatus.COMPLETE.value
        ).order_by(desc(Order.created_at), desc(Order.id)).all()
    
    def find_order_with_details(self, order_id: int) -> Optional[Order]:
        """Get order with line items, products, payment and user loaded"""
        return self.db.query(Order).options(
            _with_items(),
            selectinload(Order.payment),
            selectinload(Order.user)
        ).filter(Order.id == order_id).populate_existing().first()
    
    def find_orders_only_containing(self, product_id: str) -> List[Order]:
        """Get orders whose one and only line item is ``product_id``"""
        single_item_orders = select(OrderProduct.order_id).group_by(
            OrderProduct.order_id
        ).having(func.count(OrderProduct.id) == 1)
        return self.db.query(Order).join(Order.order_products).filter(
            OrderProduct.product_id == product_id,
            Order.id.in_(single_item_orders)
        ).all()
    
    def add(self, order: Order) -> Order:
        """Stage a new order and flush to obtain its ID"""
        self.db.add(order)
        self.db.flush()
        return order
    
    def delete(self, order: Order) -> None:
        """Delete order; line items go with it"""
        self.db.delete(order)
        self.db.flush()
