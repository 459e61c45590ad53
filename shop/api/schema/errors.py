# shop/api/schema/errors.py
from graphql import GraphQLError

from shop.domain.errors import ShopError


def to_graphql_error(error: ShopError) -> GraphQLError:
    """Odpowiednik HTTPException z routerow REST: kod bledu w extensions."""
    return GraphQLError(error.message, extensions={"code": error.code})
