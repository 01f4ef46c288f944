from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class DeployRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str = ""
    json_schema: Optional[Dict[str, Any]] = Field(default=None, alias="jsonSchema")


class DeployResponseDTO(BaseModel):
    success: bool
    id: str
    url: str


class ExperienceResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    code: str
    json_schema: Optional[Dict[str, Any]] = Field(default=None, alias="jsonSchema")


class ShareResponseDTO(BaseModel):
    id: str
    preview: Dict[str, Any]
