from cupid.generate_code.controller.dto.generate_code_dto import (
    GenerateCodeRequestDTO,
    GenerateCodeResponseDTO,
)
from cupid.generate_code.service.generate_code_service import (
    GenerateCodeService,
    get_generate_code_service,
)
from fastapi import APIRouter, Depends

router = APIRouter(prefix="/api", tags=["generate_code"])


@router.post("/generate-code", response_model=GenerateCodeResponseDTO)
async def generate_code(
    body: GenerateCodeRequestDTO,
    service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateCodeResponseDTO:
    code = await service.generate(body.json_schema)
    return GenerateCodeResponseDTO(code=code)
