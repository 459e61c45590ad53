# shop/repos/user_repo.py
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shop.data.models import UserModel, OrderModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def _with_orders(self):
        return selectinload(UserModel.orders).selectinload(OrderModel.items)

    def get_user(self, user_id: uuid.UUID) -> UserModel | None:
        return self.db.execute(
            select(UserModel)
            .where(UserModel.id == user_id)
            .options(self._with_orders())
        ).scalar_one_or_none()

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def list_users(self) -> list[UserModel]:
        return list(
            self.db.execute(select(UserModel).options(self._with_orders())).scalars().all()
        )

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete_user(self, user: UserModel) -> None:
        # kaskada: user -> orders -> orderItem w jednej transakcji
        self.db.delete(user)
        self.db.commit()

    def rollback(self):
        self.db.rollback()
