# shop/services/user_service.py
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shop.data.models import UserModel
from shop.domain.errors import ConflictError, NotFoundError
from shop.domain.schemas import UserCreate, UserRead, parse_id, parse_input
from shop.repos.user_repo import UserRepo
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Use case'y dla uzytkownikow.
    Usuniecie usera kasuje jego zamowienia i ich pozycje.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    #query
    def find_all(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def find_one(self, user_id) -> UserRead | None:
        uid = parse_id(user_id)
        if uid is None:
            return None
        user = self.repo.get_user(uid)
        if not user:
            return None
        return UserRead.model_validate(user)

    #commands
    def create_user(self, name: str, email: str) -> UserRead:
        payload = parse_input(UserCreate, name=name, email=email)

        if self.repo.get_user_by_email(payload.email):
            raise ConflictError(f"User with email {payload.email} already exists")

        try:
            created = self.repo.create_user(UserModel(name=payload.name, email=payload.email))
        except IntegrityError as e:
            # rownolegly insert z tym samym emailem
            self.repo.rollback()
            raise ConflictError(f"User with email {payload.email} already exists") from e

        logger.info(f"User {created.id} created")
        return UserRead.model_validate(created)

    def delete_user(self, user_id) -> UserRead:
        uid = parse_id(user_id)
        user = self.repo.get_user(uid) if uid else None
        if not user:
            raise NotFoundError(f"User with id {user_id} not found")

        # snapshot przed delete, potem wiersza juz nie ma
        deleted = UserRead.model_validate(user)
        self.repo.delete_user(user)

        logger.info(
            f"User {deleted.id} deleted with {len(deleted.orders)} orders "
            f"and {sum(len(o.items) for o in deleted.orders)} order items"
        )
        return deleted
