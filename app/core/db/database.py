# 모든 모델을 import하여 메타데이터에 등록
from core.db.connection import engine
from core.db.model.base import Base
from cupid.experience.domain.experience import Experience

# 모델이 추가되면 아래에 추가
_models = [Experience]


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    # experiences 는 영구 보관 대상이므로 종료 시 테이블을 삭제하지 않는다
    await engine.dispose()
