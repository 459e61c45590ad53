"""Tests for OrderService: atomic order + items writes and cascading delete."""

from decimal import Decimal
import uuid

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from shop.data.models import OrderItemModel, OrderModel, OrderStatus
from shop.domain.errors import ForeignKeyError, NotFoundError, ValidationError
from shop.services.order_item_service import OrderItemService

ONE_ITEM = [{"quantity": 1, "unit_price": Decimal("10.00")}]


class TestCreateOrder:
    def test_order_is_created_with_all_items(self, order_service, make_user, count_rows):
        user = make_user()
        items = [
            {"quantity": 2, "unit_price": Decimal("19.99")},
            {"quantity": 1, "unit_price": "5.01"},
        ]

        order = order_service.create_order(user.id, "paid", Decimal("45.00"), items)

        assert order.user_id == user.id
        assert order.status == OrderStatus.PAID
        assert order.total_cost == Decimal("45.00")
        assert sorted(i.unit_price for i in order.items) == [Decimal("5.01"), Decimal("19.99")]
        assert all(i.order_id == order.id for i in order.items)
        assert order.user.email == user.email
        assert count_rows(OrderModel) == 1
        assert count_rows(OrderItemModel) == 2

    @pytest.mark.parametrize("status", ["pending", "paid", "shipped", "cancelled"])
    def test_every_status_is_accepted(self, order_service, make_user, status):
        user = make_user()

        order = order_service.create_order(user.id, status, Decimal("10.00"), ONE_ITEM)

        assert order.status.value == status

    def test_empty_items_are_rejected(self, order_service, make_user, count_rows):
        user = make_user()

        with pytest.raises(ValidationError):
            order_service.create_order(user.id, "pending", Decimal("100.00"), [])

        assert count_rows(OrderModel) == 0

    def test_quantity_outside_int32_is_rejected(self, order_service, make_user, count_rows):
        user = make_user()
        items = [{"quantity": 2**31, "unit_price": Decimal("1.00")}]

        with pytest.raises(ValidationError):
            order_service.create_order(user.id, "pending", Decimal("1.00"), items)

        assert count_rows(OrderModel) == 0

    def test_unknown_status_is_rejected(self, order_service, make_user):
        user = make_user()

        with pytest.raises(ValidationError):
            order_service.create_order(user.id, "refunded", Decimal("10.00"), ONE_ITEM)

    def test_more_than_two_fraction_digits_is_rejected(self, order_service, make_user):
        user = make_user()

        with pytest.raises(ValidationError):
            order_service.create_order(user.id, "pending", Decimal("10.001"), ONE_ITEM)

    def test_unknown_user_raises_foreign_key_error(self, order_service, count_rows):
        """No order and no item row may be created for a missing user."""
        with pytest.raises(ForeignKeyError) as exc_info:
            order_service.create_order(uuid.uuid4(), "pending", Decimal("100.00"), ONE_ITEM)

        assert isinstance(exc_info.value, NotFoundError)
        assert isinstance(exc_info.value, ValidationError)
        assert count_rows(OrderModel) == 0
        assert count_rows(OrderItemModel) == 0

    def test_failed_commit_leaves_no_partial_rows(
        self, order_service, make_user, db_session, count_rows, monkeypatch
    ):
        """Rows flushed before a failing commit are rolled back together."""
        user = make_user()

        def failing_commit():
            db_session.flush()
            raise IntegrityError("INSERT INTO orders", {}, Exception("boom"))

        monkeypatch.setattr(db_session, "commit", failing_commit)

        with pytest.raises(ForeignKeyError):
            order_service.create_order(
                user.id,
                "pending",
                Decimal("30.00"),
                [{"quantity": 1, "unit_price": "10.00"}] * 3,
            )

        monkeypatch.undo()
        assert count_rows(OrderModel) == 0
        assert count_rows(OrderItemModel) == 0


class TestFindOrders:
    def test_find_all_resolves_user_and_items(self, order_service, make_user, make_order):
        user = make_user()
        make_order(user.id, n_items=2)
        make_order(user.id, n_items=1)

        orders = order_service.find_all()

        assert len(orders) == 2
        assert {len(o.items) for o in orders} == {1, 2}
        assert all(o.user.id == user.id for o in orders)

    def test_find_one_unknown_returns_none(self, order_service):
        assert order_service.find_one(uuid.uuid4()) is None


class TestDeleteOrder:
    def test_delete_removes_order_and_items(
        self, order_service, make_user, make_order, db_session, count_rows
    ):
        user = make_user()
        order = make_order(user.id, n_items=4)
        other = make_order(user.id, n_items=1)

        snapshot = order_service.delete_order(order.id)

        remaining = OrderItemService(db_session).find_all()
        assert not [i for i in remaining if i.order_id == order.id]
        assert [i.order_id for i in remaining] == [other.id]
        assert count_rows(OrderModel) == 1

        assert snapshot.id == order.id
        assert len(snapshot.items) == 4

    def test_delete_keeps_the_user(self, order_service, user_service, make_user, make_order):
        user = make_user()
        order = make_order(user.id)

        order_service.delete_order(order.id)

        found = user_service.find_one(user.id)
        assert found is not None
        assert found.orders == []

    def test_delete_unknown_raises_not_found(self, order_service):
        with pytest.raises(NotFoundError):
            order_service.delete_order(uuid.uuid4())

    def test_second_delete_raises_not_found(self, order_service, make_user, make_order):
        user = make_user()
        order = make_order(user.id)
        order_service.delete_order(order.id)

        with pytest.raises(NotFoundError):
            order_service.delete_order(order.id)


class TestDatabaseCascade:
    """ON DELETE CASCADE must work without the ORM unit of work."""

    def test_core_delete_of_user_cascades(self, make_user, make_order, db_session, count_rows):
        from sqlalchemy import delete

        from shop.data.models import UserModel

        user = make_user()
        make_order(user.id, n_items=3)

        db_session.execute(delete(UserModel).where(UserModel.id == user.id))
        db_session.commit()

        assert count_rows(OrderModel) == 0
        assert count_rows(OrderItemModel) == 0

    def test_order_item_cannot_reference_missing_order(self, db_session):
        db_session.add(OrderItemModel(order_id=uuid.uuid4(), quantity=1, unit_price=Decimal("1.00")))

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

        assert db_session.execute(select(OrderItemModel)).first() is None
