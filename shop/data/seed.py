# shop/data/seed.py
import uuid

from faker import Faker
from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

from shop.data.database import SessionLocal, init_db
from shop.data.models import OrderItemModel, OrderModel, OrderStatus, UserModel
from shop.utils.settings import SEED_USERS, SEED_ORDERS_PER_USER, SEED_ITEMS_PER_ORDER
from shop.utils.logging import get_logger

logger = get_logger(__name__)

BATCH_SIZE = 1000


def _insert_in_batches(db: Session, model, rows: list[dict]):
    for start in range(0, len(rows), BATCH_SIZE):
        db.execute(insert(model), rows[start:start + BATCH_SIZE])


def seed(
    db: Session,
    num_users: int = SEED_USERS,
    orders_per_user: int = SEED_ORDERS_PER_USER,
    items_per_order: int = SEED_ITEMS_PER_ORDER,
) -> dict:
    """
    Czysci tabele i wstawia losowe dane testowe.
    Zwraca liczbe wstawionych wierszy per tabela.
    """
    fake = Faker()

    # kolejnosc odwrotna do kluczy obcych
    logger.info("Clearing existing data...")
    db.execute(delete(OrderItemModel))
    db.execute(delete(OrderModel))
    db.execute(delete(UserModel))

    users = [
        {"id": uuid.uuid4(), "name": fake.name(), "email": fake.unique.email()}
        for _ in range(num_users)
    ]

    orders = [
        {
            "id": uuid.uuid4(),
            "user_id": user["id"],
            "status": fake.random_element(list(OrderStatus)),
            "total_cost": fake.pydecimal(right_digits=2, min_value=10, max_value=1000),
        }
        for user in users
        for _ in range(orders_per_user)
    ]

    items = [
        {
            "id": uuid.uuid4(),
            "order_id": order["id"],
            "quantity": fake.random_int(min=1, max=10),
            "unit_price": fake.pydecimal(right_digits=2, min_value=1, max_value=100),
        }
        for order in orders
        for _ in range(items_per_order)
    ]

    logger.info(f"Seeding {len(users)} users, {len(orders)} orders, {len(items)} order items...")
    _insert_in_batches(db, UserModel, users)
    _insert_in_batches(db, OrderModel, orders)
    _insert_in_batches(db, OrderItemModel, items)
    db.commit()

    logger.info("Seeding completed")
    return {"users": len(users), "orders": len(orders), "order_items": len(items)}


if __name__ == "__main__":
    init_db()
    session = SessionLocal()
    try:
        seed(session)
    finally:
        session.close()
