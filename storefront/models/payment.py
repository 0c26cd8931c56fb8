"""
SQLAlchemy Payment model
"""
import uuid

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storefront.database import Base
from storefront.models.enums import PaymentProvider, PaymentStatus, values


class Payment(Base):
    """Payment record attached to an order; written by the payment flow, read here"""
    
    __tablename__ = "payments"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, unique=True)
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    provider = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default=PaymentStatus.PENDING.value)
    provider_transaction_id = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    order = relationship("Order", back_populates="payment")
    
    __table_args__ = (
        CheckConstraint(f"provider IN ({values(PaymentProvider)})", name='check_payment_provider_valid'),
        CheckConstraint(f"status IN ({values(PaymentStatus)})", name='check_payment_status_valid'),
    )
    
    def __repr__(self):
        return f"<Payment(id='{self.id}', order_id={self.order_id}, status='{self.status}')>"
