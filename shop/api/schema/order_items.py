# shop/api/schema/order_items.py
from typing import List

import strawberry
from strawberry.types import Info

from shop.api.schema.errors import to_graphql_error
from shop.api.schema.types import CreateOrderItemInput, DeleteOrderItemInput, OrderItemType
from shop.domain.errors import ShopError


@strawberry.type
class OrderItemQuery:
    @strawberry.field
    def order_items(self, info: Info) -> List[OrderItemType]:
        return [OrderItemType.from_read(i) for i in info.context["order_items"].find_all()]


@strawberry.type
class OrderItemMutation:
    @strawberry.mutation
    def create_order_item(self, info: Info, input: CreateOrderItemInput) -> OrderItemType:
        try:
            created = info.context["order_items"].create_order_item(
                input.order_id,
                input.quantity,
                input.unit_price,
            )
        except ShopError as e:
            raise to_graphql_error(e) from e
        return OrderItemType.from_read(created)

    @strawberry.mutation
    def delete_order_item(self, info: Info, input: DeleteOrderItemInput) -> OrderItemType:
        try:
            deleted = info.context["order_items"].delete_order_item(input.id)
        except ShopError as e:
            raise to_graphql_error(e) from e
        return OrderItemType.from_read(deleted)
