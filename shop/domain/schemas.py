# shop/domain/schemas.py
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic import ValidationError as PydanticValidationError

from shop.data.models.order import OrderStatus
from shop.domain.errors import ValidationError

Money = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]

# kolumna INTEGER (int32) w postgresie
Quantity = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]

SchemaT = TypeVar("SchemaT", bound=BaseModel)


# =====================================================
# INPUT
# =====================================================
class UserCreate(BaseModel):
    """Schema dla tworzenia uzytkownika."""

    name: str = Field(..., min_length=2, max_length=100, description="Imie i nazwisko (2-100 znakow)")
    email: EmailStr = Field(..., description="Poprawny adres email")


class OrderItemIn(BaseModel):
    """Pozycja zamowienia tworzona razem z zamowieniem."""

    quantity: Quantity
    unit_price: Money


class OrderCreate(BaseModel):
    user_id: uuid.UUID
    status: OrderStatus = OrderStatus.PENDING
    total_cost: Money
    items: List[OrderItemIn] = Field(..., min_length=1, description="Co najmniej jedna pozycja")


class OrderItemCreate(BaseModel):
    order_id: uuid.UUID
    quantity: Quantity
    unit_price: Money


# =====================================================
# READ (snapshoty zwracane przez serwisy)
# =====================================================
class OrderItemRead(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    quantity: int
    unit_price: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """User bez zamowien, uzywany jako wlasciciel zamowienia."""

    id: uuid.UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    status: OrderStatus
    total_cost: Decimal
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemRead] = []
    user: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)


class UserRead(UserSummary):
    orders: List[OrderRead] = []


# =====================================================
# HELPERS
# =====================================================
def parse_input(schema: Type[SchemaT], **data) -> SchemaT:
    """Buduje schema wejsciowa, bledy pydantic zamienia na ValidationError domeny."""
    try:
        return schema(**data)
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(details) from e


def parse_id(value) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None
