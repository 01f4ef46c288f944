from abc import ABC

from sqlalchemy.ext.asyncio import AsyncSession


class Repository(ABC):
    """세션을 소유하는 레포지토리 기반 클래스 (@transactional 이 commit/rollback/close 호출)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def close(self) -> None:
        await self.session.close()
