import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from cupid.chat.domain.turn import Role, Turn
from cupid.common.prompts import CUPID_GREETING
from pydantic import BaseModel, Field

SESSION_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionMode(str, Enum):
    CHATTING = "chatting"
    GENERATING = "generating"
    EDITING = "editing"


class SessionState(BaseModel):
    """빌더 세션 상태. 변경은 transitions.apply_event 로만 한다."""

    key: str
    mode: SessionMode = SessionMode.CHATTING
    transcript: List[Turn] = Field(default_factory=list)
    json_schema: Optional[Dict[str, Any]] = None
    code: str = ""
    is_complete: bool = False
    missing_topics: List[str] = Field(default_factory=list)
    share_url: Optional[str] = None
    updated_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def new(cls, key: str) -> "SessionState":
        return cls(
            key=key,
            transcript=[Turn(role=Role.ASSISTANT, content=CUPID_GREETING)],
        )

    def has_user_turns(self) -> bool:
        return any(turn.role == Role.USER for turn in self.transcript)
