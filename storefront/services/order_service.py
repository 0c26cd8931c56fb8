"""
Order Service - Business Logic Layer

Every state-changing operation runs in a single transaction, so a failed
call leaves the database exactly as it was.
"""
from contextlib import contextmanager
from typing import Dict, Iterable, Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError
)
from storefront.models.enums import OrderStatus
from storefront.models.order import Order, OrderProduct
from storefront.models.user import User
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.order_product_repository import OrderProductRepository
from storefront.schemas.order import OrderItemIn, OrderResponse, UserOrdersData
from storefront.services.product_service import ProductService

logger = structlog.get_logger(__name__)


def _require_positive(quantity: int) -> None:
    if quantity is None or quantity <= 0:
        raise ValidationError("Quantity must be a positive integer")


class OrderService:
    """Service layer for the order lifecycle"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = OrderRepository(db)
        self.item_repository = OrderProductRepository(db)
        self.catalog = ProductService(db)

    @contextmanager
    def _transaction(self):
        """Commit on success, roll back on any error"""
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _detail(self, order_id: int) -> OrderResponse:
        order = self.repository.find_order_with_details(order_id)
        if not order:
            raise NotFoundError("Order not found")
        return OrderResponse.model_validate(order)

    def _load_modifiable_order(self, user_id: int, order_id: int) -> Order:
        """Fetch an order the user may change: it exists, is theirs, and is still active"""
        order = self.repository.find_order_with_details(order_id)
        if not order:
            raise NotFoundError("Order not found")
        if order.user_id != user_id:
            raise ForbiddenError("Not authorized to access this order")
        if not order.is_active:
            raise InvalidStateError("Cannot modify a completed order")
        return order

    # Queries

    def get_user_orders(self, user_id: int) -> UserOrdersData:
        """Get the user's active order and completed orders"""
        active = self.repository.find_active_order_for_user(user_id)
        completed = self.repository.find_completed_orders_for_user(user_id)
        return UserOrdersData(
            active_order=OrderResponse.model_validate(active) if active else None,
            completed_orders=[OrderResponse.model_validate(o) for o in completed]
        )

    def get_order_for_user(self, user: User, order_id: int) -> OrderResponse:
        """Get an order visible to ``user``: their own, or any order for an admin"""
        order = self.repository.find_order_with_details(order_id)
        if not order:
            raise NotFoundError("Order not found")
        if order.user_id != user.id and not user.is_admin:
            raise ForbiddenError("Not authorized to access this order")
        return OrderResponse.model_validate(order)

    # Mutations

    @staticmethod
    def _merge_quantities(items: Iterable[OrderItemIn]) -> Dict[str, int]:
        """Collapse repeated products into one quantity per product, keeping request order"""
        quantities: Dict[str, int] = {}
        for item in items:
            _require_positive(item.quantity)
            quantities[item.product_id] = quantities.get(item.product_id, 0) + item.quantity
        return quantities

    def create_order(self, user_id: int, items: Iterable[OrderItemIn]) -> OrderResponse:
        """
        Create an active order from a cart

        Args:
            user_id: Owner of the new order
            items: Requested products and quantities

        Returns:
            Created order with line items and products

        Raises:
            ValidationError: If ``items`` is empty
            ConflictError: If the user already has an active order
            NotFoundError: If any product does not exist
        """
        quantities = self._merge_quantities(items)
        if not quantities:
            raise ValidationError("Order must contain at least one product")

        with self._transaction():
            if self.repository.find_active_order_for_user(user_id):
                raise ConflictError("You already have an active order")

            products = {p.id: p for p in self.catalog.resolve_by_ids(quantities)}
            if len(products) < len(quantities):
                raise NotFoundError("One or more products not found")

            order = Order(user_id=user_id, status=OrderStatus.ACTIVE.value)
            try:
                self.repository.add(order)
            except IntegrityError as e:
                # Lost the race against a concurrent create for the same user
                raise ConflictError("You already have an active order") from e

            for product_id, quantity in quantities.items():
                self.item_repository.add(OrderProduct(
                    order_id=order.id,
                    product_id=products[product_id].id,
                    quantity=quantity
                ))
            order_id = order.id

        logger.info("order.created", order_id=order_id, user_id=user_id, items=len(quantities))
        return self._detail(order_id)

    def add_item(self, user_id: int, order_id: int, product_id: str, quantity: int) -> OrderResponse:
        """
        Add a product to an active order

        A product already on the order has its quantity increased rather than
        getting a second line item.
        """
        _require_positive(quantity)

        with self._transaction():
            self._load_modifiable_order(user_id, order_id)

            if not self.catalog.resolve_by_ids([product_id]):
                raise NotFoundError("Product not found")

            existing = self.item_repository.find_by_order_and_product(order_id, product_id)
            if existing:
                existing.quantity += quantity
                self.db.flush()
                new_quantity = existing.quantity
            else:
                try:
                    self.item_repository.add(OrderProduct(
                        order_id=order_id,
                        product_id=product_id,
                        quantity=quantity
                    ))
                except IntegrityError as e:
                    # A concurrent add inserted the same product first
                    raise ConflictError("This product was just added to the order. Please retry.") from e
                new_quantity = quantity

        logger.info("order.item_added", order_id=order_id, product_id=product_id, quantity=new_quantity)
        return self._detail(order_id)

    def update_item_quantity(self, user_id: int, order_id: int, item_id: int, quantity: int) -> OrderResponse:
        """Replace a line item's quantity"""
        _require_positive(quantity)

        with self._transaction():
            self._load_modifiable_order(user_id, order_id)

            item = self.item_repository.find_by_id_and_order(item_id, order_id)
            if not item:
                raise NotFoundError("Order item not found")

            item.quantity = quantity
            self.db.flush()

        logger.info("order.item_quantity_updated", order_id=order_id, item_id=item_id, quantity=quantity)
        return self._detail(order_id)

    def remove_item(self, user_id: int, order_id: int, item_id: int) -> Optional[OrderResponse]:
        """
        Remove a line item from an active order

        Returns:
            The updated order, or None when the last item was removed and the
            order was deleted with it
        """
        with self._transaction():
            order = self._load_modifiable_order(user_id, order_id)

            item = self.item_repository.find_by_id_and_order(item_id, order_id)
            if not item:
                raise NotFoundError("Order item not found")

            self.item_repository.delete(item)

            order_deleted = self.item_repository.count_for_order(order_id) == 0
            if order_deleted:
                # Stale collection still holds the removed item
                self.db.expire(order, ["order_products"])
                self.repository.delete(order)

        if order_deleted:
            logger.info("order.deleted_empty", order_id=order_id, user_id=user_id)
            return None

        logger.info("order.item_removed", order_id=order_id, item_id=item_id)
        return self._detail(order_id)

    def update_order_status(self, order_id: int, new_status: OrderStatus) -> OrderResponse:
        """
        Set the order status

        ``active -> complete`` is the only real transition; setting the current
        status again is a no-op and reopening a completed order is refused.
        """
        new_status = OrderStatus(new_status)

        with self._transaction():
            order = self.repository.get_by_id(order_id)
            if not order:
                raise NotFoundError("Order not found")

            old_status = OrderStatus(order.status)
            if old_status == OrderStatus.COMPLETE and new_status == OrderStatus.ACTIVE:
                raise InvalidStateError("Cannot reopen a completed order")

            if old_status != new_status:
                order.status = new_status.value
                self.db.flush()

        logger.info("order.status_changed", order_id=order_id, old_status=old_status.value, new_status=new_status.value)
        return self._detail(order_id)
