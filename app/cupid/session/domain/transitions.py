"""
빌더 세션 이벤트와 상태 전이

apply_event 는 순수 함수이고, 저장은 SessionStore.dispatch 가 담당한다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from cupid.chat.domain.turn import Role, Turn
from cupid.session.domain.session_state import SessionMode, SessionState, utc_now

CHAT_FAILURE_REPLY = "Oops! Something went wrong. Let's try that again?"


@dataclass(frozen=True)
class UserMessageSent:
    content: str


@dataclass(frozen=True)
class AssistantReplied:
    content: str
    is_complete: bool = False
    missing_topics: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChatFailed:
    pass


@dataclass(frozen=True)
class GenerationStarted:
    pass


@dataclass(frozen=True)
class SchemaTranslated:
    json_schema: Dict[str, Any]


@dataclass(frozen=True)
class CodeGenerated:
    code: str


@dataclass(frozen=True)
class GenerationFailed:
    fallback: SessionMode


@dataclass(frozen=True)
class Deployed:
    share_url: str


@dataclass(frozen=True)
class Reset:
    pass


def _append(state: SessionState, role: Role, content: str) -> List[Turn]:
    return [*state.transcript, Turn(role=role, content=content)]


def apply_event(state: SessionState, event: Any) -> SessionState:
    if isinstance(event, Reset):
        return SessionState.new(state.key)

    if isinstance(event, UserMessageSent):
        update = {"transcript": _append(state, Role.USER, event.content)}
    elif isinstance(event, AssistantReplied):
        update = {
            "transcript": _append(state, Role.ASSISTANT, event.content),
            "is_complete": event.is_complete,
            "missing_topics": list(event.missing_topics),
        }
    elif isinstance(event, ChatFailed):
        update = {"transcript": _append(state, Role.ASSISTANT, CHAT_FAILURE_REPLY)}
    elif isinstance(event, GenerationStarted):
        update = {"mode": SessionMode.GENERATING}
    elif isinstance(event, SchemaTranslated):
        update = {"json_schema": event.json_schema}
    elif isinstance(event, CodeGenerated):
        # 코드가 바뀌면 이전 공유 링크는 현재 코드와 다르다
        update = {"code": event.code, "mode": SessionMode.EDITING, "share_url": None}
    elif isinstance(event, GenerationFailed):
        update = {"mode": event.fallback}
        if event.fallback == SessionMode.CHATTING:
            # 대화를 이어서 다시 완료 판정을 받을 수 있도록
            update["is_complete"] = False
    elif isinstance(event, Deployed):
        update = {"share_url": event.share_url}
    else:
        raise TypeError(f"Unknown session event: {type(event).__name__}")

    update["updated_at"] = utc_now()
    return state.model_copy(update=update)
