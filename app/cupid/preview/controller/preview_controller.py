from typing import Any, Dict

from core.config import get_setting
from cupid.common.preview import build_preview
from cupid.preview.controller.dto.preview_dto import PreviewRequestDTO
from fastapi import APIRouter

settings = get_setting()

router = APIRouter(prefix="/api", tags=["preview"])


@router.post("/preview")
async def preview(body: PreviewRequestDTO) -> Dict[str, Any]:
    return build_preview(body.code, body.base_url or settings.PUBLIC_BASE_URL)
