# shop/api/schema/__init__.py
import strawberry

from shop.api.schema.order_items import OrderItemMutation, OrderItemQuery
from shop.api.schema.orders import OrderMutation, OrderQuery
from shop.api.schema.users import UserMutation, UserQuery
from shop.utils.logging import get_logger

logger = get_logger(__name__)


@strawberry.type
class Query(UserQuery, OrderQuery, OrderItemQuery):
    pass


@strawberry.type
class Mutation(UserMutation, OrderMutation, OrderItemMutation):
    pass


class ShopSchema(strawberry.Schema):
    def process_errors(self, errors, execution_context=None):
        for error in errors:
            code = (error.extensions or {}).get("code")
            # bez path = blad parsowania / walidacji / koercji wejscia, przed resolverami
            if code is None and not error.path:
                code = "BAD_USER_INPUT"
                error.extensions = {**(error.extensions or {}), "code": code}
            if code:
                logger.info(f"GraphQL {code}: {error.message}")
            else:
                logger.error(f"GraphQL error: {error.message}", exc_info=error.original_error)


schema = ShopSchema(query=Query, mutation=Mutation)

__all__ = ["schema", "Query", "Mutation"]
