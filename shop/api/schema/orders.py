# shop/api/schema/orders.py
from typing import List, Optional

import strawberry
from strawberry.types import Info

from shop.api.schema.errors import to_graphql_error
from shop.api.schema.types import CreateOrderInput, DeleteOrderInput, OrderType
from shop.domain.errors import ShopError


@strawberry.type
class OrderQuery:
    @strawberry.field(description="All orders with owner and items")
    def orders(self, info: Info) -> List[OrderType]:
        return [OrderType.from_read(o) for o in info.context["orders"].find_all()]

    @strawberry.field(description="Single order, null when not found")
    def order(self, info: Info, id: strawberry.ID) -> Optional[OrderType]:
        found = info.context["orders"].find_one(id)
        return OrderType.from_read(found) if found else None


@strawberry.type
class OrderMutation:
    @strawberry.mutation(description="Creates an order together with its items")
    def create_order(self, info: Info, input: CreateOrderInput) -> OrderType:
        items = [{"quantity": i.quantity, "unit_price": i.unit_price} for i in input.items]
        try:
            created = info.context["orders"].create_order(
                input.user_id,
                input.status,
                input.total_cost,
                items,
            )
        except ShopError as e:
            raise to_graphql_error(e) from e
        return OrderType.from_read(created)

    @strawberry.mutation
    def delete_order(self, info: Info, input: DeleteOrderInput) -> OrderType:
        try:
            deleted = info.context["orders"].delete_order(input.id)
        except ShopError as e:
            raise to_graphql_error(e) from e
        return OrderType.from_read(deleted)
