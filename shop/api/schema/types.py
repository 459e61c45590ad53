# shop/api/schema/types.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import strawberry

from shop.data.models.order import OrderStatus
from shop.domain.schemas import OrderItemRead, OrderRead, UserRead, UserSummary


# =====================================================
# OUTPUT
# =====================================================
@strawberry.type(name="OrderItem", description="Single line of an order")
class OrderItemType:
    id: strawberry.ID
    order_id: strawberry.ID
    quantity: int
    unit_price: Decimal = strawberry.field(description="Price snapshot taken when the order was placed")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_read(cls, item: OrderItemRead) -> "OrderItemType":
        return cls(
            id=strawberry.ID(str(item.id)),
            order_id=strawberry.ID(str(item.order_id)),
            quantity=item.quantity,
            unit_price=item.unit_price,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    orders: Optional[List["OrderType"]] = strawberry.field(
        default=None,
        description="Orders placed by the user; null when the user is nested in an order",
    )

    @classmethod
    def from_read(cls, user: UserSummary) -> "UserType":
        orders = None
        if isinstance(user, UserRead):
            orders = [OrderType.from_read(o) for o in user.orders]
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
            orders=orders,
        )


@strawberry.type(name="Order")
class OrderType:
    id: strawberry.ID
    user_id: strawberry.ID
    status: str = strawberry.field(description="One of: pending, paid, shipped, cancelled")
    total_cost: Decimal
    items: List[OrderItemType]
    created_at: datetime
    updated_at: datetime
    user: Optional[UserType] = strawberry.field(default=None, description="User who placed the order")

    @classmethod
    def from_read(cls, order: OrderRead) -> "OrderType":
        return cls(
            id=strawberry.ID(str(order.id)),
            user_id=strawberry.ID(str(order.user_id)),
            status=order.status.value,
            total_cost=order.total_cost,
            items=[OrderItemType.from_read(i) for i in order.items],
            created_at=order.created_at,
            updated_at=order.updated_at,
            user=UserType.from_read(order.user) if order.user else None,
        )


# =====================================================
# INPUT
# =====================================================
@strawberry.input
class CreateUserInput:
    name: str = strawberry.field(description="Full name (2-100 chars)")
    email: str = strawberry.field(description="Valid email address")


@strawberry.input
class DeleteUserInput:
    id: strawberry.ID


@strawberry.input
class CreateOrderOrderItemInput:
    quantity: int
    unit_price: Decimal


@strawberry.input
class CreateOrderInput:
    user_id: strawberry.ID
    total_cost: Decimal
    items: List[CreateOrderOrderItemInput] = strawberry.field(description="At least one item")
    status: str = OrderStatus.PENDING.value


@strawberry.input
class DeleteOrderInput:
    id: strawberry.ID


@strawberry.input
class CreateOrderItemInput:
    order_id: strawberry.ID
    quantity: int
    unit_price: Decimal


@strawberry.input
class DeleteOrderItemInput:
    id: strawberry.ID
