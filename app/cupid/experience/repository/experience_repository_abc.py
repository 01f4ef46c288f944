from abc import abstractmethod
from typing import Any, Dict, Optional

from core.bind.repository import Repository
from cupid.experience.domain.experience import Experience


class ExperienceRepositoryABC(Repository):
    @abstractmethod
    async def create(
        self, code: str, json_schema: Optional[Dict[str, Any]] = None
    ) -> Experience:
        pass

    @abstractmethod
    async def get(self, experience_id: str) -> Optional[Experience]:
        pass
