# shop/api/routers/graphql_api.py
from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import GraphQLRouter

from shop.api.schema import schema
from shop.data.database import get_db
from shop.services.order_item_service import OrderItemService
from shop.services.order_service import OrderService
from shop.services.user_service import UserService


def get_context(db: Session = Depends(get_db)):
    """Serwisy budowane per request na sesji z get_db."""
    return {
        "db": db,
        "users": UserService(db),
        "orders": OrderService(db),
        "order_items": OrderItemService(db),
    }


router = GraphQLRouter(schema, context_getter=get_context)
