"""
Order status state machine tests.
"""
import pytest

from apps.orders.domain.events import OrderStatusChanged
from apps.orders.domain.exceptions import InvalidTransitionError
from apps.orders.domain.value_objects import OrderStatus
from tests.factories import build_custom_order, build_order

S = OrderStatus

LEGAL = [
    (S.PENDING, S.CONFIRMED),
    (S.PENDING, S.PROCESSING),
    (S.PENDING, S.DELIVERED),
    (S.CONFIRMED, S.SHIPPED),
    (S.PROCESSING, S.DELIVERED),
    (S.SHIPPED, S.DELIVERED),
    (S.PENDING, S.CANCELLED),
    (S.CONFIRMED, S.CANCELLED),
    (S.PROCESSING, S.CANCELLED),
]

ILLEGAL = [
    (S.DELIVERED, S.PENDING),
    (S.DELIVERED, S.CANCELLED),
    (S.SHIPPED, S.CANCELLED),
    (S.SHIPPED, S.PROCESSING),
    (S.CONFIRMED, S.PENDING),
    (S.PENDING, S.PENDING),
    (S.PROCESSING, S.PROCESSING),
] + [(S.CANCELLED, target) for target in S]


class TestTransitionTable:

    @pytest.mark.parametrize('current, target', LEGAL)
    def test_legal(self, current, target):
        assert current.can_transition_to(target)

    @pytest.mark.parametrize('current, target', ILLEGAL)
    def test_illegal(self, current, target):
        assert not current.can_transition_to(target)

    def test_terminal_states(self):
        assert S.DELIVERED.is_terminal
        assert S.CANCELLED.is_terminal
        assert not S.SHIPPED.is_terminal


class TestChangeStatus:

    def test_skipping_path_pending_processing_delivered(self):
        order = build_order()
        order.change_status(S.PROCESSING)
        order.change_status(S.DELIVERED)
        assert order.status == S.DELIVERED
        assert order.version == 3

    def test_delivered_cannot_go_back_to_pending(self):
        order = build_order()
        order.change_status(S.DELIVERED)
        with pytest.raises(InvalidTransitionError) as exc_info:
            order.change_status(S.PENDING)
        assert exc_info.value.details() == {'current_status': 'delivered', 'requested_status': 'pending'}
        assert order.status == S.DELIVERED

    @pytest.mark.parametrize('target', list(S))
    def test_nothing_leaves_cancelled(self, target):
        order = build_order()
        order.change_status(S.CANCELLED)
        with pytest.raises(InvalidTransitionError):
            order.change_status(target)

    def test_rejected_transition_mutates_nothing(self):
        order = build_order()
        order.change_status(S.SHIPPED)
        order.clear_domain_events()
        before = (order.status, order.version, order.updated_at)
        with pytest.raises(InvalidTransitionError):
            order.change_status(S.CANCELLED)
        assert (order.status, order.version, order.updated_at) == before
        assert order.domain_events == []

    def test_legal_transition_bumps_version_and_emits_event(self):
        order = build_order()
        order.clear_domain_events()
        created_updated_at = order.updated_at
        order.change_status(S.CONFIRMED)

        assert order.version == 2
        assert order.updated_at >= created_updated_at
        [event] = order.domain_events
        assert isinstance(event, OrderStatusChanged)
        assert (event.old_status, event.new_status) == ('pending', 'confirmed')
        assert event.tracking_id == order.tracking_id.value

    def test_custom_orders_share_the_lifecycle(self):
        custom_order = build_custom_order()
        custom_order.change_status(S.CONFIRMED)
        with pytest.raises(InvalidTransitionError):
            custom_order.change_status(S.PENDING)
        assert custom_order.status == S.CONFIRMED


class TestTimeline:

    def test_pending_order_timeline(self):
        order = build_order()
        timeline = order.timeline()
        assert [entry.status for entry in timeline] == [S.PENDING, S.CONFIRMED, S.PROCESSING, S.SHIPPED, S.DELIVERED]
        assert [entry.reached for entry in timeline] == [True, False, False, False, False]
        assert timeline[0].at == order.created_at

    def test_current_stage_carries_updated_at(self):
        order = build_order()
        order.change_status(S.PROCESSING)
        timeline = order.timeline()
        assert [entry.reached for entry in timeline] == [True, True, True, False, False]
        assert timeline[2].at == order.updated_at
        assert timeline[1].at is None

    def test_cancelled_order_gets_final_entry(self):
        order = build_order()
        order.change_status(S.CANCELLED)
        timeline = order.timeline()
        assert timeline[-1].status == S.CANCELLED
        assert timeline[-1].reached
        assert timeline[-1].at == order.updated_at
        assert len(timeline) == 6
