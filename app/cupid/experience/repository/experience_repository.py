from typing import Any, Dict, Optional

from core.db.connection import get_session
from cupid.experience.domain.experience import Experience, new_experience_id
from cupid.experience.repository.experience_repository_abc import (
    ExperienceRepositoryABC,
)
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession


class ExperienceRepository(ExperienceRepositoryABC):
    def __init__(self, session: AsyncSession):
        super().__init__(session)

    async def create(
        self, code: str, json_schema: Optional[Dict[str, Any]] = None
    ) -> Experience:
        experience = Experience(id=new_experience_id(), code=code, json_schema=json_schema)
        self.session.add(experience)
        # INSERT 오류를 서비스 안에서 받기 위해 커밋 전에 flush
        await self.session.flush()
        await self.session.refresh(experience)
        return experience

    async def get(self, experience_id: str) -> Optional[Experience]:
        return await self.session.get(Experience, experience_id)


# FastAPI Depends 용 DI 팩토리
def get_experience_repository(
    session: AsyncSession = Depends(get_session),
) -> ExperienceRepository:
    return ExperienceRepository(session)
