# shop/repos/order_repo.py
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shop.data.models import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def _eager(self):
        return (selectinload(OrderModel.user), selectinload(OrderModel.items))

    def get_order(self, order_id: uuid.UUID) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel)
            .where(OrderModel.id == order_id)
            .options(*self._eager())
        ).scalar_one_or_none()

    def list_orders(self) -> list[OrderModel]:
        return list(
            self.db.execute(select(OrderModel).options(*self._eager())).scalars().all()
        )

    def create_order(self, order: OrderModel) -> OrderModel:
        # order + items leca jednym commitem (jedna transakcja)
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def delete_order(self, order: OrderModel) -> None:
        self.db.delete(order)
        self.db.commit()

    def rollback(self):
        self.db.rollback()
