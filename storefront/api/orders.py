"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, require_admin
from storefront.database import get_db
from storefront.models.user import User
from storefront.services.order_service import OrderService
from storefront.schemas.order import (
    OrderCreate,
    OrderItemAdd,
    OrderItemUpdate,
    OrderStatusUpdate,
    OrderData,
    OrderEnvelope,
    UserOrdersEnvelope
)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.get("", response_model=UserOrdersEnvelope, summary="Get my orders")
def get_user_orders(
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve the authenticated user's active order and completed orders
    """
    return UserOrdersEnvelope(data=service.get_user_orders(user.id))


@router.get("/{order_id}", response_model=OrderEnvelope, summary="Get order by ID")
def get_order(
    order_id: int,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order by ID

    Owners see their own orders; administrators see any order.
    """
    return OrderEnvelope(data=OrderData(order=service.get_order_for_user(user, order_id)))


@router.post("", response_model=OrderEnvelope, status_code=status.HTTP_201_CREATED, summary="Create order")
def create_order(
    order_data: OrderCreate,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new active order from a cart

    - **items**: At least one `{product_id, quantity}`

    Fails with 400 when the user already has an active order and with 404
    when any product does not exist.
    """
    order = service.create_order(user.id, order_data.items)
    return OrderEnvelope(data=OrderData(order=order))


@router.patch("/{order_id}", response_model=OrderEnvelope, summary="Update order status")
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    admin: User = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status (administrators only)

    - **status**: `active` or `complete`
    """
    order = service.update_order_status(order_id, status_data.status)
    return OrderEnvelope(data=OrderData(order=order))


@router.post("/{order_id}/items", response_model=OrderEnvelope, summary="Add item to order")
def add_item(
    order_id: int,
    item_data: OrderItemAdd,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Add a product to the user's active order

    Adding a product already on the order increases its quantity.
    """
    order = service.add_item(user.id, order_id, item_data.product_id, item_data.quantity)
    return OrderEnvelope(data=OrderData(order=order))


@router.patch("/{order_id}/items/{item_id}", response_model=OrderEnvelope, summary="Update item quantity")
def update_item_quantity(
    order_id: int,
    item_id: int,
    item_data: OrderItemUpdate,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Replace the quantity of a line item
    """
    order = service.update_item_quantity(user.id, order_id, item_id, item_data.quantity)
    return OrderEnvelope(data=OrderData(order=order))


@router.delete("/{order_id}/items/{item_id}", response_model=OrderEnvelope, summary="Remove item from order")
def remove_item(
    order_id: int,
    item_id: int,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Remove a line item

    When the last item goes, the order is deleted and `data.order` is null.
    """
    order = service.remove_item(user.id, order_id, item_id)
    if order is None:
        return OrderEnvelope(
            message="Order deleted because it had no items",
            data=OrderData(order=None)
        )
    return OrderEnvelope(data=OrderData(order=order))
