from typing import List, Optional

from cupid.chat.domain.turn import Turn
from pydantic import BaseModel, ConfigDict, Field


class ChatRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: List[Turn]
    system_instruction: Optional[str] = Field(default=None, alias="systemInstruction")


class ChatResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: str
    is_complete: bool = Field(alias="isComplete")
    missing_topics: List[str] = Field(default_factory=list, alias="missingTopics")
