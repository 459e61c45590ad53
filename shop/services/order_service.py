# shop/services/order_service.py
from decimal import Decimal
from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shop.data.models import OrderModel, OrderItemModel, OrderStatus, UserModel
from shop.domain.errors import ForeignKeyError, NotFoundError
from shop.domain.schemas import OrderCreate, OrderRead, parse_id, parse_input
from shop.repos.order_repo import OrderRepo
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Zamowienie i jego pozycje zapisywane sa atomowo.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def find_all(self) -> List[OrderRead]:
        return [OrderRead.model_validate(o) for o in self.repo.list_orders()]

    def find_one(self, order_id) -> OrderRead | None:
        oid = parse_id(order_id)
        order = self.repo.get_order(oid) if oid else None
        if not order:
            return None
        return OrderRead.model_validate(order)

    def create_order(
        self,
        user_id,
        status: str | OrderStatus,
        total_cost: Decimal | str,
        items: Sequence[dict],
    ) -> OrderRead:
        """
        Use Case: Tworzenie zamowienia razem z pozycjami.

        1. Walidacja wejscia (min. 1 pozycja, status z enuma, kwoty 2 miejsca po przecinku)
        2. Sprawdzenie, czy user istnieje
        3. Jeden commit na order + items; blad = rollback calosci
        """
        payload = parse_input(
            OrderCreate,
            user_id=user_id,
            status=status,
            total_cost=total_cost,
            items=list(items),
        )

        user_exists = self.db.execute(
            select(UserModel.id).where(UserModel.id == payload.user_id)
        ).scalar_one_or_none()

        if user_exists is None:
            raise ForeignKeyError(f"User with id {payload.user_id} not found")

        order = OrderModel(
            user_id=payload.user_id,
            status=payload.status,
            total_cost=payload.total_cost,
            items=[
                OrderItemModel(quantity=i.quantity, unit_price=i.unit_price)
                for i in payload.items
            ],
        )

        try:
            created = self.repo.create_order(order)
        except IntegrityError as e:
            # np. user usuniety miedzy sprawdzeniem a commitem
            self.repo.rollback()
            raise ForeignKeyError(f"User with id {payload.user_id} not found") from e

        logger.info(f"Order {created.id} created for user {payload.user_id} with {len(payload.items)} items")
        return OrderRead.model_validate(created)

    def delete_order(self, order_id) -> OrderRead:
        oid = parse_id(order_id)
        order = self.repo.get_order(oid) if oid else None
        if not order:
            raise NotFoundError(f"Order with id {order_id} not found")

        deleted = OrderRead.model_validate(order)
        self.repo.delete_order(order)

        logger.info(f"Order {deleted.id} deleted with {len(deleted.items)} items")
        return deleted
