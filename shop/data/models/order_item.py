import uuid

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Numeric, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shop.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "orderItem"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    # cena z chwili zamowienia, nie referencja do katalogu
    unit_price = Column(Numeric(10, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    order = relationship("OrderModel", back_populates="items")
