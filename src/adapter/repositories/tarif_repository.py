"""SQLAlchemy Tarif Repository Implementation"""

from typing import Iterable, List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.tarif_repository import TarifRepository
from src.domain.tarif import Tarif


class SqlAlchemyTarifRepository(TarifRepository):
    """SQLAlchemy implementation of TarifRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tarif_id: int) -> Optional[Tarif]:
        statement = select(Tarif).where(Tarif.id == tarif_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_group_ids(self, group_ids: Iterable[int]) -> List[Tarif]:
        group_ids = list(group_ids)
        if not group_ids:
            return []

        statement = (
            select(Tarif)
            .where(Tarif.group_id.in_(group_ids))
            .order_by(Tarif.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, tarif: Tarif) -> Tarif:
        self.session.add(tarif)
        await self.session.flush()
        await self.session.refresh(tarif)
        return tarif
