"""
Enumerations shared by models and schemas
"""
from enum import Enum


class OrderStatus(str, Enum):
    ACTIVE = "active"
    COMPLETE = "complete"


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class ProductCategory(str, Enum):
    HEADPHONES = "headphones"
    SPEAKERS = "speakers"
    EARPHONES = "earphones"


class PaymentProvider(str, Enum):
    STRIPE = "stripe"
    PAYPAL = "paypal"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


def values(enum_cls) -> str:
    """Render enum values as a SQL IN list, e.g. ``'active', 'complete'``"""
    return ", ".join(f"'{member.value}'" for member in enum_cls)
