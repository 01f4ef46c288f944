from typing import Callable

from core.ai.llm import LLM, LLMError
from core.ai.llm_factory import get_llm, get_llm_factory
from core.ai.output_parser import MalformedOutputError
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from cupid.common.prompts import TRANSLATOR_PROMPT, TRANSLATOR_SYSTEM_PROMPT
from cupid.translate.domain.configuration_schema import ConfigurationSchema
from cupid.translate.service.translate_service_abc import TranslateServiceABC
from fastapi import Depends
from pydantic import ValidationError

logger = get_logging()


def build_translate_prompt(transcript: str) -> str:
    return (
        f"{TRANSLATOR_PROMPT}\n\n{transcript}\n\n"
        "Return ONLY the JSON object, no additional text."
    )


class TranslateService(TranslateServiceABC):
    def __init__(self, llm_factory: Callable[[], LLM] = get_llm):
        self.llm_factory = llm_factory

    async def translate(self, transcript: str) -> ConfigurationSchema:
        if not transcript or not transcript.strip():
            raise ServiceException(
                ErrorCode.BAD_REQUEST, message="Transcript is required"
            )

        llm = self.llm_factory()
        try:
            raw = await llm.extract_structured(
                llm.models.translate,
                TRANSLATOR_SYSTEM_PROMPT,
                build_translate_prompt(transcript),
            )
            schema = ConfigurationSchema.model_validate(raw)
        except (MalformedOutputError, ValidationError) as e:
            logger.warning(f"번역 결과 파싱 실패: {e}")
            raise ServiceException(
                ErrorCode.MALFORMED_MODEL_OUTPUT, details=str(e)
            ) from e
        except LLMError as e:
            logger.error(f"번역 호출 실패: {e}")
            raise ServiceException(ErrorCode.TRANSLATION_FAILED, details=str(e)) from e

        logger.info(f"번역 완료: {schema.APP_TITLE}")
        return schema


# FastAPI Depends 용 DI 팩토리
def get_translate_service(
    llm_factory: Callable[[], LLM] = Depends(get_llm_factory),
) -> TranslateService:
    return TranslateService(llm_factory)
