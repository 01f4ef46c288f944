import json
from typing import Any, Callable, Dict

from core.ai.llm import LLM, LLMError
from core.ai.llm_factory import get_llm, get_llm_factory
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from cupid.common.prompts import (
    GENERATOR_SUFFIX,
    GENERATOR_SYSTEM_PROMPT,
    SKELETON_PROMPT,
)
from cupid.common.sanitizer import sanitize_code
from cupid.generate_code.service.generate_code_service_abc import (
    GenerateCodeServiceABC,
)
from fastapi import Depends

logger = get_logging()


def build_generate_prompt(json_schema: Dict[str, Any]) -> str:
    schema_text = json.dumps(json_schema, indent=2, ensure_ascii=False)
    return f"{SKELETON_PROMPT}\n\n{schema_text}\n\n{GENERATOR_SUFFIX}"


class GenerateCodeService(GenerateCodeServiceABC):
    def __init__(self, llm_factory: Callable[[], LLM] = get_llm):
        self.llm_factory = llm_factory

    async def generate(self, json_schema: Dict[str, Any]) -> str:
        if not isinstance(json_schema, dict):
            raise ServiceException(
                ErrorCode.BAD_REQUEST,
                message="JSON schema is required and must be an object",
            )

        llm = self.llm_factory()
        try:
            raw = await llm.converse(
                llm.models.generate,
                GENERATOR_SYSTEM_PROMPT,
                [{"role": "user", "content": build_generate_prompt(json_schema)}],
            )
        except LLMError as e:
            logger.error(f"코드 생성 호출 실패: {e}")
            raise ServiceException(ErrorCode.GENERATION_FAILED, details=str(e)) from e

        code = sanitize_code(raw or "")
        if not code:
            raise ServiceException(
                ErrorCode.MALFORMED_MODEL_OUTPUT, details="Model returned no code"
            )

        logger.debug(f"코드 생성 완료 ({len(code)} chars)")
        return code


# FastAPI Depends 용 DI 팩토리
def get_generate_code_service(
    llm_factory: Callable[[], LLM] = Depends(get_llm_factory),
) -> GenerateCodeService:
    return GenerateCodeService(llm_factory)
