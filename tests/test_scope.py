"""Unit tests for Scope."""

import pytest

from infra_common.exceptions import ScopeExpiredError
from infra_common.models import DeliveredMessage
from infra_common.scope import Scope, check_scope


@pytest.mark.unit
class TestScope:
    def test_unbounded_scope_never_expires(self):
        scope = Scope()

        assert scope.remaining() is None
        assert not scope.done
        scope.raise_if_done()

    def test_deadline_in_the_past_is_expired(self):
        scope = Scope.with_timeout(0)

        assert scope.expired
        assert scope.done
        assert scope.remaining() == 0.0

    def test_remaining_is_bounded_by_timeout(self):
        scope = Scope.with_timeout(30)

        assert 0 < scope.remaining() <= 30
        assert not scope.expired

    def test_cancel_marks_done(self):
        scope = Scope.with_timeout(30)

        scope.cancel()

        assert scope.cancelled
        with pytest.raises(ScopeExpiredError) as exc_info:
            scope.raise_if_done()
        assert exc_info.value.reason == "cancelled"

    def test_carries_delivered_message(self):
        message = DeliveredMessage(topic="orders", body="order-42")

        scope = Scope(timeout=30, message=message)

        assert scope.message.body == "order-42"

    def test_check_scope_accepts_none(self):
        check_scope(None)
