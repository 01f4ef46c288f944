from typing import Callable, List, Optional

from core.ai.llm import LLM, LLMError
from core.ai.llm_factory import get_llm, get_llm_factory
from core.ai.output_parser import MalformedOutputError
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from cupid.chat.domain.completion_check import ChatReply, CompletionCheck
from cupid.chat.domain.turn import Turn, render_transcript
from cupid.chat.service.chat_service_abc import ChatServiceABC
from cupid.common.prompts import (
    COMPLETION_CHECK_PROMPT,
    COMPLETION_CHECK_SYSTEM_PROMPT,
    CUPID_SYSTEM_PROMPT,
)
from fastapi import Depends

logger = get_logging()


def build_completion_check_prompt(turns: List[Turn], reply: str) -> str:
    conversation = render_transcript(turns, separator="\n")
    return (
        f"{COMPLETION_CHECK_PROMPT}\n\nConversation:\n{conversation}"
        f"\n\nCupid: {reply}"
    )


class ChatService(ChatServiceABC):
    def __init__(self, llm_factory: Callable[[], LLM] = get_llm):
        self.llm_factory = llm_factory

    async def reply(
        self, turns: List[Turn], system_instruction: Optional[str] = None
    ) -> ChatReply:
        if not turns:
            raise ServiceException(
                ErrorCode.BAD_REQUEST, message="Messages array is required"
            )

        llm = self.llm_factory()
        try:
            response = await llm.converse(
                llm.models.chat,
                system_instruction or CUPID_SYSTEM_PROMPT,
                [turn.as_message() for turn in turns],
            )
        except LLMError as e:
            logger.error(f"Cupid 응답 생성 실패: {e}")
            raise ServiceException(ErrorCode.CHAT_FAILED, details=str(e)) from e

        completion = await self.judge_completion(turns, response)
        return ChatReply(response=response, completion=completion)

    async def judge_completion(self, turns: List[Turn], reply: str) -> CompletionCheck:
        llm = self.llm_factory()
        try:
            data = await llm.extract_structured(
                llm.models.check,
                COMPLETION_CHECK_SYSTEM_PROMPT,
                build_completion_check_prompt(turns, reply),
            )
        except MalformedOutputError as e:
            # 판정 결과를 읽을 수 없으면 미완료로 간주
            logger.warning(f"완료 판정 파싱 실패: {e}")
            return CompletionCheck()
        except LLMError as e:
            logger.error(f"완료 판정 호출 실패: {e}")
            raise ServiceException(ErrorCode.CHAT_FAILED, details=str(e)) from e

        check = CompletionCheck.from_model_output(data)
        logger.debug(
            f"완료 판정: {check.has_enough_info}, 누락 {len(check.missing_topics)}건"
        )
        return check


# FastAPI Depends 용 DI 팩토리
def get_chat_service(
    llm_factory: Callable[[], LLM] = Depends(get_llm_factory),
) -> ChatService:
    return ChatService(llm_factory)
