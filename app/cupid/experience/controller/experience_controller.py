from core.config import get_setting
from cupid.common.preview import build_preview
from cupid.experience.controller.dto.experience_dto import (
    DeployRequestDTO,
    DeployResponseDTO,
    ExperienceResponseDTO,
    ShareResponseDTO,
)
from cupid.experience.service.experience_service import (
    ExperienceService,
    get_experience_service,
)
from fastapi import APIRouter, Depends

settings = get_setting()

router = APIRouter(tags=["experience"])


@router.post("/api/deploy", response_model=DeployResponseDTO)
async def deploy(
    body: DeployRequestDTO,
    service: ExperienceService = Depends(get_experience_service),
) -> DeployResponseDTO:
    result = await service.deploy(body.code, body.json_schema)
    return DeployResponseDTO(success=True, id=result.id, url=result.url)


@router.get(
    "/api/experiences/{experience_id}",
    response_model=ExperienceResponseDTO,
    response_model_by_alias=True,
)
async def get_experience(
    experience_id: str,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponseDTO:
    experience = await service.get_experience(experience_id)
    return ExperienceResponseDTO.model_validate(experience)


@router.get("/share/{experience_id}", response_model=ShareResponseDTO)
async def share(
    experience_id: str,
    service: ExperienceService = Depends(get_experience_service),
) -> ShareResponseDTO:
    experience = await service.get_experience(experience_id)
    return ShareResponseDTO(
        id=experience.id,
        preview=build_preview(experience.code, settings.PUBLIC_BASE_URL),
    )
