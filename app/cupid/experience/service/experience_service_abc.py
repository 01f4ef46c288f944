from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from cupid.experience.domain.experience import Experience
from cupid.experience.service.deploy_result import DeployResult


class ExperienceServiceABC(ABC):
    @abstractmethod
    async def deploy(
        self, code: str, json_schema: Optional[Dict[str, Any]] = None
    ) -> DeployResult:
        """
        생성된 코드를 저장하고 공유 링크를 발급합니다.
        """
        pass

    @abstractmethod
    async def get_experience(self, experience_id: str) -> Experience:
        """
        공유 id 로 저장된 체험을 조회합니다. 없으면 EXPERIENCE_NOT_FOUND.
        """
        pass
