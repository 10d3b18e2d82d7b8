"""Unit tests for User balance, access flag and credit access"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.credit_access import CreditAccess
from src.domain.exceptions import CreditAccessUnavailableError

NOW = datetime(2024, 5, 15, 12, 0, 0)


class TestUserBalance:

    def test_subtract_can_go_negative(self, user):
        balance = user.subtract_from_balance(Decimal("130"))

        assert balance.amount == Decimal("-30")
        assert not balance.is_positive()
        assert user.balance == Decimal("-30")

    def test_add_returns_new_balance(self, user):
        balance = user.add_to_balance(Decimal("0.5"))

        assert balance.amount == Decimal("100.5")
        assert user.current_balance() == balance


class TestAccessGranted:

    def test_non_negative_balance_grants_access(self, user):
        user.balance = Decimal("0")

        assert user.update_access_granted(NOW) is True
        assert user.access_granted is True

    def test_debt_without_credit_access_revokes_access(self, user):
        user.balance = Decimal("-1")
        user.access_granted = True

        assert user.update_access_granted(NOW) is False

    def test_debt_with_running_credit_access_keeps_access(self, user):
        user.balance = Decimal("-1")
        user.credit_access = CreditAccess(
            user_id=1, taken_at=NOW - timedelta(days=1), active_until=NOW + timedelta(days=2)
        )

        assert user.update_access_granted(NOW) is True

    def test_debt_with_elapsed_credit_access_revokes_access(self, user):
        user.balance = Decimal("-1")
        user.credit_access = CreditAccess(
            user_id=1, taken_at=NOW - timedelta(days=5), active_until=NOW - timedelta(days=2)
        )

        assert user.update_access_granted(NOW) is False


class TestTakeCreditAccess:

    def test_first_window_creates_record(self, user):
        user.balance = Decimal("-10")

        credit_access = user.take_credit_access(NOW, days=3)

        assert user.credit_access is credit_access
        assert credit_access.user_id == 1
        assert credit_access.taken_at == NOW
        assert credit_access.active_until == NOW + timedelta(days=3)
        assert user.access_granted is True

    def test_elapsed_window_is_renewed(self, user):
        user.balance = Decimal("-10")
        old = CreditAccess(
            id=7, user_id=1, taken_at=NOW - timedelta(days=10), active_until=NOW - timedelta(days=7)
        )
        user.credit_access = old

        credit_access = user.take_credit_access(NOW, days=3)

        assert credit_access is old
        assert credit_access.active_until == NOW + timedelta(days=3)

    def test_positive_balance_cannot_take_credit(self, user):
        with pytest.raises(CreditAccessUnavailableError) as exc_info:
            user.take_credit_access(NOW, days=3)

        assert exc_info.value.code == "CREDIT_ACCESS_UNAVAILABLE"
        assert user.credit_access is None

    def test_running_window_cannot_be_extended(self, user):
        user.balance = Decimal("-10")
        until = NOW + timedelta(days=1)
        user.credit_access = CreditAccess(user_id=1, taken_at=NOW - timedelta(days=2), active_until=until)

        with pytest.raises(CreditAccessUnavailableError):
            user.take_credit_access(NOW, days=3)

        assert user.credit_access.active_until == until


class TestCreditAccessDaysUsed:

    def test_days_used_counts_up_to_now(self):
        credit_access = CreditAccess(
            user_id=1, taken_at=datetime(2024, 5, 12, 23, 0), active_until=datetime(2024, 5, 20)
        )

        assert credit_access.days_used(NOW) == 3

    def test_days_used_stops_at_window_end(self):
        credit_access = CreditAccess(
            user_id=1, taken_at=datetime(2024, 5, 1, 9, 0), active_until=datetime(2024, 5, 4, 9, 0)
        )

        assert credit_access.days_used(NOW) == 3

    def test_never_taken(self):
        credit_access = CreditAccess(user_id=1)

        assert credit_access.days_used(NOW) == 0
        assert credit_access.can_take(NOW)
        assert not credit_access.is_active(NOW)

    def test_window_end_is_inclusive(self):
        credit_access = CreditAccess(user_id=1, taken_at=NOW - timedelta(days=3), active_until=NOW)

        assert credit_access.is_active(NOW)
        assert not credit_access.can_take(NOW)
