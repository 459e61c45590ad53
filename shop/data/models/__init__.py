#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from shop.data.models.user import UserModel
from shop.data.models.order import OrderModel, OrderStatus
from shop.data.models.order_item import OrderItemModel

__all__ = ["UserModel", "OrderModel", "OrderStatus", "OrderItemModel"]
