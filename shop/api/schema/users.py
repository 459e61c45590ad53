# shop/api/schema/users.py
from typing import List, Optional

import strawberry
from strawberry.types import Info

from shop.api.schema.errors import to_graphql_error
from shop.api.schema.types import CreateUserInput, DeleteUserInput, UserType
from shop.domain.errors import ShopError


@strawberry.type
class UserQuery:
    @strawberry.field(description="All users with their orders and order items")
    def users(self, info: Info) -> List[UserType]:
        return [UserType.from_read(u) for u in info.context["users"].find_all()]

    @strawberry.field(description="Single user, null when not found")
    def user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        found = info.context["users"].find_one(id)
        return UserType.from_read(found) if found else None


@strawberry.type
class UserMutation:
    @strawberry.mutation
    def create_user(self, info: Info, input: CreateUserInput) -> UserType:
        try:
            created = info.context["users"].create_user(input.name, input.email)
        except ShopError as e:
            raise to_graphql_error(e) from e
        return UserType.from_read(created)

    @strawberry.mutation(description="Deletes the user with all orders; returns the deleted user")
    def delete_user(self, info: Info, input: DeleteUserInput) -> UserType:
        try:
            deleted = info.context["users"].delete_user(input.id)
        except ShopError as e:
            raise to_graphql_error(e) from e
        return UserType.from_read(deleted)
