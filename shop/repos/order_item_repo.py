# shop/repos/order_item_repo.py
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from shop.data.models import OrderItemModel


class OrderItemRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_order_item(self, item_id: uuid.UUID) -> OrderItemModel | None:
        return self.db.get(OrderItemModel, item_id)

    def list_order_items(self) -> list[OrderItemModel]:
        return list(self.db.execute(select(OrderItemModel)).scalars().all())

    def create_order_item(self, item: OrderItemModel) -> OrderItemModel:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_order_item(self, item: OrderItemModel) -> None:
        self.db.delete(item)
        self.db.commit()

    def rollback(self):
        self.db.rollback()
