# shop/services/order_item_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shop.data.models import OrderItemModel, OrderModel
from shop.domain.errors import ForeignKeyError, NotFoundError
from shop.domain.schemas import OrderItemCreate, OrderItemRead, parse_id, parse_input
from shop.repos.order_item_repo import OrderItemRepo
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class OrderItemService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderItemRepo(db)

    def find_all(self) -> List[OrderItemRead]:
        return [OrderItemRead.model_validate(i) for i in self.repo.list_order_items()]

    def create_order_item(self, order_id, quantity: int, unit_price: Decimal | str) -> OrderItemRead:
        payload = parse_input(
            OrderItemCreate,
            order_id=order_id,
            quantity=quantity,
            unit_price=unit_price,
        )

        if not self.db.get(OrderModel, payload.order_id):
            raise ForeignKeyError(f"Order with id {payload.order_id} not found")

        item = OrderItemModel(
            order_id=payload.order_id,
            quantity=payload.quantity,
            unit_price=payload.unit_price,
        )

        try:
            created = self.repo.create_order_item(item)
        except IntegrityError as e:
            self.repo.rollback()
            raise ForeignKeyError(f"Order with id {payload.order_id} not found") from e

        logger.info(f"Order item {created.id} added to order {payload.order_id}")
        return OrderItemRead.model_validate(created)

    def delete_order_item(self, item_id) -> OrderItemRead:
        iid = parse_id(item_id)
        item = self.repo.get_order_item(iid) if iid else None
        if not item:
            raise NotFoundError(f"Order item with id {item_id} not found")

        deleted = OrderItemRead.model_validate(item)
        self.repo.delete_order_item(item)

        logger.info(f"Order item {deleted.id} deleted from order {deleted.order_id}")
        return deleted
