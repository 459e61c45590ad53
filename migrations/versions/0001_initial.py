"""Create users, orders and orderItem tables.

Revision ID: 0001
Revises:
Create Date: 2025-10-04

- users: unique email
- orders: FK to users with ON DELETE CASCADE, status enum orders_status_enum
- orderItem: FK to orders with ON DELETE CASCADE
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ORDER_STATUSES = ("pending", "paid", "shipped", "cancelled")


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create the three tables and the order status enum."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum(*ORDER_STATUSES, name="orders_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("total_cost", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_orders_user_id", "orders", ["user_id"])

    op.create_table(
        "orderItem",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "order_id",
            sa.Uuid(),
            sa.ForeignKey("orders.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_orderItem_order_id", "orderItem", ["order_id"])


def downgrade() -> None:
    """Drop tables in reverse FK order, then the enum type."""
    op.drop_index("ix_orderItem_order_id", table_name="orderItem")
    op.drop_table("orderItem")
    op.drop_index("ix_orders_user_id", table_name="orders")
    op.drop_table("orders")
    op.drop_table("users")
    sa.Enum(name="orders_status_enum").drop(op.get_bind(), checkfirst=True)
