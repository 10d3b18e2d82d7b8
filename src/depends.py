from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.domain.clock import Clock, SystemClock
from src.domain.policy import ServicePolicy

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def build_service_policy(config=ApplicationConfig) -> ServicePolicy:
    return ServicePolicy(
        latency_period_days=config.LATENCY_PERIOD_DAYS,
        forbidden_days=frozenset(config.FORBIDDEN_DAYS),
        tarif_group_ids=tuple(config.TARIF_GROUP_IDS),
        days_per_month=config.DAYS_PER_MONTH,
        credit_access_days=config.CREDIT_ACCESS_DAYS,
    )


def get_service_policy() -> ServicePolicy:
    return build_service_policy(ApplicationConfig)


def get_clock() -> Clock:
    return SystemClock()
