"""
Order line item Repository - Data Access Layer
"""
from typing import Optional
from sqlalchemy.orm import Session

from storefront.models.order import OrderProduct


class OrderProductRepository:
    """Repository for order line items"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def find_by_order_and_product(self, order_id: int, product_id: str) -> Optional[OrderProduct]:
        return self.db.query(OrderProduct).filter(
            OrderProduct.order_id == order_id,
            OrderProduct.product_id == product_id
        ).first()
    
    def find_by_id_and_order(self, item_id: int, order_id: int) -> Optional[OrderProduct]:
        return self.db.query(OrderProduct).filter(
            OrderProduct.id == item_id,
            OrderProduct.order_id == order_id
        ).first()
    
    def count_for_order(self, order_id: int) -> int:
        return self.db.query(OrderProduct).filter(OrderProduct.order_id == order_id).count()
    
    def add(self, item: OrderProduct) -> OrderProduct:
        self.db.add(item)
        self.db.flush()
        return item
    
    def delete(self, item: OrderProduct) -> None:
        self.db.delete(item)
        self.db.flush()
