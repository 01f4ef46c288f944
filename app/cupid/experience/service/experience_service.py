import uuid
from typing import Any, Dict, Optional

from core.config import get_setting
from core.db.database_transaction import transactional
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from cupid.experience.domain.experience import Experience
from cupid.experience.repository.experience_repository import (
    ExperienceRepository,
    get_experience_repository,
)
from cupid.experience.repository.experience_repository_abc import (
    ExperienceRepositoryABC,
)
from cupid.experience.service.deploy_result import DeployResult
from cupid.experience.service.experience_service_abc import ExperienceServiceABC
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

settings = get_setting()
logger = get_logging()


def share_url(experience_id: str, base_url: Optional[str] = None) -> str:
    base = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")
    return f"{base}/share/{experience_id}"


class ExperienceService(ExperienceServiceABC):
    def __init__(
        self,
        experience_repository: ExperienceRepositoryABC,
        public_base_url: Optional[str] = None,
    ):
        self.experience_repository = experience_repository
        self.public_base_url = public_base_url or settings.PUBLIC_BASE_URL

    @transactional
    async def deploy(
        self, code: str, json_schema: Optional[Dict[str, Any]] = None
    ) -> DeployResult:
        if not code:
            raise ServiceException(ErrorCode.BAD_REQUEST, message="Code is required")

        try:
            experience = await self.experience_repository.create(code, json_schema)
        except SQLAlchemyError as e:
            logger.error(f"체험 저장 실패: {e}")
            raise ServiceException(ErrorCode.DEPLOY_FAILED, details=str(e)) from e

        logger.info(f"Deployed experience with ID: {experience.id}")
        return DeployResult(
            id=experience.id, url=share_url(experience.id, self.public_base_url)
        )

    @transactional
    async def get_experience(self, experience_id: str) -> Experience:
        try:
            uuid.UUID(experience_id)
        except ValueError:
            raise ServiceException(ErrorCode.EXPERIENCE_NOT_FOUND) from None

        experience = await self.experience_repository.get(experience_id)
        if experience is None:
            raise ServiceException(ErrorCode.EXPERIENCE_NOT_FOUND)
        return experience


# FastAPI Depends 용 DI 팩토리
def get_experience_service(
    experience_repository: ExperienceRepository = Depends(get_experience_repository),
) -> ExperienceService:
    return ExperienceService(experience_repository)
