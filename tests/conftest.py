import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.clock import FixedClock
from src.domain.policy import ServicePolicy
from src.domain.service import Service
from src.domain.tarif import Tarif, TarifType
from src.domain.user import User


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def clock():
    """Clock frozen at 2024-05-15 12:00"""
    return FixedClock(datetime(2024, 5, 15, 12, 0, 0))


@pytest.fixture
def policy():
    """Default policy: 10 latency days, forbidden 29-31, 30-day months"""
    return ServicePolicy()


@pytest.fixture
def basic_tarif():
    """1-month internet tarif, 30 per period, 1 per day"""
    return Tarif(
        id=1,
        name="Home 30",
        group_id=1,
        price=30,
        pay_period_months=1,
        base_price_per_day=Decimal("1"),
        speed=100,
        type=TarifType.INTERNET,
    )


@pytest.fixture
def double_tarif():
    """2-month internet tarif, 120 per period, 2 per day"""
    return Tarif(
        id=2,
        name="Home 120 x2",
        group_id=1,
        price=120,
        pay_period_months=2,
        base_price_per_day=Decimal("2"),
        speed=200,
        type=TarifType.INTERNET,
    )


@pytest.fixture
def tv_tarif():
    """1-month TV tarif in the same group"""
    return Tarif(
        id=3,
        name="TV Basic",
        group_id=1,
        price=15,
        pay_period_months=1,
        base_price_per_day=Decimal("0.5"),
        speed=0,
        type=TarifType.TV,
    )


@pytest.fixture
def foreign_group_tarif():
    """Internet tarif of another group"""
    return Tarif(
        id=5,
        name="Business 60",
        group_id=2,
        price=60,
        pay_period_months=1,
        base_price_per_day=Decimal("2"),
        speed=500,
        type=TarifType.INTERNET,
    )


@pytest.fixture
def user():
    """User with a balance of 100"""
    return User(id=1, name="Ivan Petrov", balance=Decimal("100"), access_granted=False)


@pytest.fixture
def make_service(user):
    """Factory for services owned by the user fixture"""

    def _make(tarif=None, payday=date(2024, 5, 10), paid_for=False, group_id=1, owner=None):
        return Service(
            id=10,
            user_id=1,
            user=owner or user,
            group_id=group_id,
            tarif_id=tarif.id if tarif else None,
            current_tarif=tarif,
            payday=payday,
            paid_for=paid_for,
        )

    return _make
