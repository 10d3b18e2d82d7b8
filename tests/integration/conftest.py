import pytest_asyncio
from datetime import datetime
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import get_session, get_clock
from src.domain import Tarif, TarifType, User
from src.domain.clock import FixedClock

NOW = datetime(2024, 5, 15, 12, 0, 0)


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'tarif_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(db_session):
    """Tarifs: two internet plans and a TV plan in group 1, one plan in group 2"""
    tarifs = [
        Tarif(id=1, name="Home 30", group_id=1, price=30, pay_period_months=1,
              base_price_per_day=Decimal("1"), speed=100, type=TarifType.INTERNET),
        Tarif(id=2, name="Home 120 x2", group_id=1, price=120, pay_period_months=2,
              base_price_per_day=Decimal("2"), speed=200, type=TarifType.INTERNET),
        Tarif(id=3, name="TV Basic", group_id=1, price=15, pay_period_months=1,
              base_price_per_day=Decimal("0.5"), speed=0, type=TarifType.TV),
        Tarif(id=5, name="Business 60", group_id=2, price=60, pay_period_months=1,
              base_price_per_day=Decimal("2"), speed=500, type=TarifType.INTERNET),
    ]
    db_session.add_all(tarifs)
    await db_session.commit()
    return {tarif.id: tarif for tarif in tarifs}


@pytest_asyncio.fixture
async def account(db_session):
    """User with a balance of 100"""
    user = User(id=1, name="Ivan Petrov", balance=Decimal("100"), access_granted=True)
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session and clock overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_clock] = lambda: FixedClock(NOW)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
