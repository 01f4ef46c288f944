from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, field_validator, model_validator


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


SPEAKER_LABELS = {Role.USER: "User", Role.ASSISTANT: "Cupid"}


class Turn(BaseModel):
    role: Role
    content: str

    @model_validator(mode="before")
    @classmethod
    def _parts_to_content(cls, data: Any) -> Any:
        # 브라우저 클라이언트는 Gemini 형식 {"role", "parts": [{"text"}]} 으로 보낸다
        if isinstance(data, dict) and "content" not in data and "parts" in data:
            parts = data.get("parts") or []
            text = "".join(
                str(part.get("text", "")) for part in parts if isinstance(part, dict)
            )
            data = {"role": data.get("role"), "content": text}
        return data

    @field_validator("role", mode="before")
    @classmethod
    def _legacy_role(cls, value):
        if value == "model":
            return Role.ASSISTANT
        return value

    def as_message(self) -> dict:
        return {"role": self.role.value, "content": self.content}


def render_transcript(turns: Iterable[Turn], separator: str = "\n\n") -> str:
    return separator.join(
        f"{SPEAKER_LABELS[turn.role]}: {turn.content}" for turn in turns
    )
