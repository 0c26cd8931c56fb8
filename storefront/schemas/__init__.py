"""
Schemas package
"""
from storefront.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
    ProductData,
    ProductEnvelope,
    ProductListEnvelope
)
from storefront.schemas.order import (
    OrderItemIn,
    OrderCreate,
    OrderItemAdd,
    OrderItemUpdate,
    OrderStatusUpdate,
    OrderProductResponse,
    PaymentResponse,
    OrderResponse,
    OrderData,
    OrderEnvelope,
    UserOrdersData,
    UserOrdersEnvelope
)
from storefront.schemas.user import (
    SignupRequest,
    LoginRequest,
    PasswordUpdate,
    ProfileUpdate,
    RoleUpdate,
    UserResponse,
    UserData,
    UserEnvelope,
    AuthEnvelope,
    UserListData,
    UserListEnvelope,
    MessageEnvelope
)

__all__ = [
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductListResponse",
    "ProductData",
    "ProductEnvelope",
    "ProductListEnvelope",
    "OrderItemIn",
    "OrderCreate",
    "OrderItemAdd",
    "OrderItemUpdate",
    "OrderStatusUpdate",
    "OrderProductResponse",
    "PaymentResponse",
    "OrderResponse",
    "OrderData",
    "OrderEnvelope",
    "UserOrdersData",
    "UserOrdersEnvelope",
    "SignupRequest",
    "LoginRequest",
    "PasswordUpdate",
    "ProfileUpdate",
    "RoleUpdate",
    "UserResponse",
    "UserData",
    "UserEnvelope",
    "AuthEnvelope",
    "UserListData",
    "UserListEnvelope",
    "MessageEnvelope"
]
