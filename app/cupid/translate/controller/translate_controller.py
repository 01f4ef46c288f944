from typing import Any, Dict

from cupid.translate.controller.dto.translate_dto import TranslateRequestDTO
from cupid.translate.service.translate_service import (
    TranslateService,
    get_translate_service,
)
from fastapi import APIRouter, Depends

router = APIRouter(prefix="/api", tags=["translate"])


@router.post("/translate")
async def translate(
    body: TranslateRequestDTO,
    service: TranslateService = Depends(get_translate_service),
) -> Dict[str, Any]:
    schema = await service.translate(body.transcript)
    return schema.model_dump()
