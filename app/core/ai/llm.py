from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from core.ai.output_parser import parse_json_object


class LLMError(Exception):
    """프로바이더 호출 실패 (네트워크, 인증, 쿼터 등)"""


class LLMNotConfiguredError(LLMError):
    """선택된 프로바이더의 API 키/엔드포인트 누락"""


@dataclass(frozen=True)
class ModelNames:
    """용도별 모델(또는 Azure deployment) 이름"""

    chat: str
    check: str
    translate: str
    generate: str


class LLM(ABC):
    """
    LLM 프로바이더 공통 인터페이스

    - converse: 시스템 프롬프트 + 대화 턴 목록으로 다음 응답 텍스트 생성
    - extract_structured: JSON 모드로 호출하고 JSON 객체로 파싱
    """

    def __init__(self, models: ModelNames):
        self.models = models

    @abstractmethod
    async def converse(
        self,
        model: str,
        system_prompt: str,
        messages: List[Dict[str, str]],
    ) -> str:
        pass

    @abstractmethod
    async def complete_json(self, model: str, system_prompt: str, prompt: str) -> str:
        """JSON 응답을 요청하고 원문 텍스트를 반환"""
        pass

    async def extract_structured(
        self, model: str, system_prompt: str, prompt: str
    ) -> Dict[str, Any]:
        text = await self.complete_json(model, system_prompt, prompt)
        return parse_json_object(text)


def drop_leading_assistant_turns(
    messages: List[Dict[str, str]],
) -> List[Dict[str, str]]:
    """첫 턴이 user 여야 하는 프로바이더용 - 앞쪽 assistant 턴(인사말 등) 제거"""
    index = 0
    while index < len(messages) and messages[index]["role"] != "user":
        index += 1
    return messages[index:]
