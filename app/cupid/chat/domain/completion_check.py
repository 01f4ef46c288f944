from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CompletionCheck:
    """수집 완료 판정 결과 (missing_topics 는 참고용)"""

    has_enough_info: bool = False
    missing_topics: List[str] = field(default_factory=list)

    @classmethod
    def from_model_output(cls, data: Dict[str, Any]) -> "CompletionCheck":
        missing = data.get("missingPoints")
        if not isinstance(missing, list):
            missing = []
        return cls(
            has_enough_info=data.get("hasEnoughInfo") is True,
            missing_topics=[str(item) for item in missing if item],
        )


@dataclass(frozen=True)
class ChatReply:
    response: str
    completion: CompletionCheck

    @property
    def is_complete(self) -> bool:
        return self.completion.has_enough_info
