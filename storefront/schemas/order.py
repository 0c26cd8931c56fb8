"""
Pydantic schemas for order requests and responses
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime

from storefront.models.enums import OrderStatus, PaymentProvider, PaymentStatus
from storefront.schemas.product import ProductResponse


class OrderItemIn(BaseModel):
    """One requested line item"""
    product_id: str = Field(..., min_length=1, max_length=50, description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity to order")


class OrderCreate(BaseModel):
    """Schema for creating a new order from a cart"""
    items: List[OrderItemIn] = Field(..., min_length=1, description="At least one product is required")


class OrderItemAdd(OrderItemIn):
    """Schema for adding an item to an existing order"""
    pass


class OrderItemUpdate(BaseModel):
    """Schema for replacing a line item's quantity"""
    quantity: int = Field(..., gt=0, description="New quantity")


class OrderStatusUpdate(BaseModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(..., description="Order status: active or complete")


class OrderProductResponse(BaseModel):
    """Line item with its product"""
    id: int
    product_id: str
    quantity: int
    product: ProductResponse
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class PaymentResponse(BaseModel):
    id: str
    amount: float
    provider: PaymentProvider
    status: PaymentStatus
    provider_transaction_id: Optional[str] = None
    created_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Schema for order response, with line items and payment joined"""
    id: int
    user_id: int
    status: OrderStatus
    order_products: List[OrderProductResponse] = []
    payment: Optional[PaymentResponse] = None
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class OrderData(BaseModel):
    order: Optional[OrderResponse]


class OrderEnvelope(BaseModel):
    """``{"status": "success", "data": {"order": ...}}``"""
    status: str = "success"
    message: Optional[str] = None
    data: OrderData


class UserOrdersData(BaseModel):
    active_order: Optional[OrderResponse]
    completed_orders: List[OrderResponse]


class UserOrdersEnvelope(BaseModel):
    status: str = "success"
    data: UserOrdersData
