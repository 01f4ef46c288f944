from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class GenerateCodeRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_schema: Dict[str, Any] = Field(alias="jsonSchema")


class GenerateCodeResponseDTO(BaseModel):
    code: str
