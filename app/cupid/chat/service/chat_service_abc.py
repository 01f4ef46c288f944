from abc import ABC, abstractmethod
from typing import List, Optional

from cupid.chat.domain.completion_check import ChatReply, CompletionCheck
from cupid.chat.domain.turn import Turn


class ChatServiceABC(ABC):
    @abstractmethod
    async def reply(
        self, turns: List[Turn], system_instruction: Optional[str] = None
    ) -> ChatReply:
        """
        Cupid 의 다음 응답을 생성하고 정보 수집 완료 여부를 함께 판정합니다.
        """
        pass

    @abstractmethod
    async def judge_completion(self, turns: List[Turn], reply: str) -> CompletionCheck:
        pass
