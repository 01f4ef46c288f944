import uuid

from core.db.model.base import Base
from sqlalchemy import JSON, Column, DateTime, String, Text, func


def new_experience_id() -> str:
    return str(uuid.uuid4())


class Experience(Base):
    """배포된 체험(코드 + 스키마). 생성 후 수정/삭제하지 않는다."""

    __tablename__ = "experiences"

    id = Column(String(36), primary_key=True, default=new_experience_id)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    code = Column(Text, nullable=False)
    json_schema = Column(JSON, nullable=True)
