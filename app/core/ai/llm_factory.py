from typing import Callable

from core.ai.llm import LLM, LLMNotConfiguredError, ModelNames
from core.config import Settings, get_setting
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException

settings = get_setting()


def create_llm(config: Settings = settings) -> LLM:
    """MODEL_PROVIDER 값에 따라 프로바이더 구현체 생성"""
    provider = (config.MODEL_PROVIDER or "GOOGLE").upper()

    if provider == "OPEN_AI":
        if not config.OPENAI_API_KEY:
            raise LLMNotConfiguredError("OPENAI_API_KEY is not configured")
        from core.ai.openai_llm import OpenAILLM

        return OpenAILLM(
            api_key=config.OPENAI_API_KEY,
            base_url=config.OPENAI_BASE_URL,
            timeout=config.LLM_TIMEOUT,
            models=ModelNames(
                chat=config.OPENAI_CHAT_MODEL,
                check=config.OPENAI_CHECK_MODEL,
                translate=config.OPENAI_TRANSLATE_MODEL,
                generate=config.OPENAI_GENERATE_MODEL,
            ),
        )

    if provider == "AZURE":
        if not config.AOAI_API_KEY or not config.AOAI_ENDPOINT:
            raise LLMNotConfiguredError("AOAI_API_KEY / AOAI_ENDPOINT is not configured")
        from core.ai.azure_llm import AzureLLM

        return AzureLLM(
            api_key=config.AOAI_API_KEY,
            base_url=config.AOAI_ENDPOINT,
            api_version=config.AOAI_API_VERSION,
            timeout=config.LLM_TIMEOUT,
            models=ModelNames(
                chat=config.AOAI_DEPLOY_GPT4O,
                check=config.AOAI_DEPLOY_GPT4O_MINI or config.AOAI_DEPLOY_GPT4O,
                translate=config.AOAI_DEPLOY_GPT4O,
                generate=config.AOAI_DEPLOY_GPT4O,
            ),
        )

    if provider == "ANTHROPIC":
        if not config.ANTHROPIC_API_KEY:
            raise LLMNotConfiguredError("ANTHROPIC_API_KEY is not configured")
        from core.ai.anthropic_llm import AnthropicLLM

        return AnthropicLLM(
            api_key=config.ANTHROPIC_API_KEY,
            max_tokens=config.ANTHROPIC_MAX_TOKENS,
            timeout=config.LLM_TIMEOUT,
            models=ModelNames(
                chat=config.ANTHROPIC_CHAT_MODEL,
                check=config.ANTHROPIC_CHECK_MODEL,
                translate=config.ANTHROPIC_TRANSLATE_MODEL,
                generate=config.ANTHROPIC_GENERATE_MODEL,
            ),
        )

    if provider == "GOOGLE":
        if not config.GOOGLE_GENAI_API_KEY:
            raise LLMNotConfiguredError("GOOGLE_GENAI_API_KEY is not configured")
        from core.ai.google_llm import GoogleLLM

        return GoogleLLM(
            api_key=config.GOOGLE_GENAI_API_KEY,
            timeout=config.LLM_TIMEOUT,
            models=ModelNames(
                chat=config.GOOGLE_CHAT_MODEL,
                check=config.GOOGLE_CHECK_MODEL,
                translate=config.GOOGLE_TRANSLATE_MODEL,
                generate=config.GOOGLE_GENERATE_MODEL,
            ),
        )

    raise LLMNotConfiguredError(f"Unknown MODEL_PROVIDER: {config.MODEL_PROVIDER}")


# FastAPI Depends 용 DI 팩토리
def get_llm() -> LLM:
    try:
        return create_llm()
    except LLMNotConfiguredError as e:
        raise ServiceException(ErrorCode.LLM_NOT_CONFIGURED, details=str(e)) from e


def get_llm_factory() -> Callable[[], LLM]:
    """
    서비스에는 LLM 인스턴스 대신 팩토리를 주입한다.
    LLM 이 필요 없는 요청(세션 조회, 배포 등)은 API 키 없이도 동작해야 한다.
    """
    return get_llm
