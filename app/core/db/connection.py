from typing import AsyncGenerator

from core.config import get_setting
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

setting = get_setting()

# sqlite 는 스레드 체크를 끄고, 그 외 드라이버는 기본값 사용
connect_args = (
    {"check_same_thread": False} if setting.DATABASE_URL.startswith("sqlite") else {}
)

engine = create_async_engine(setting.DATABASE_URL, connect_args=connect_args)

SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    session = SessionLocal()
    try:
        yield session
    except Exception as e:
        await session.rollback()
        raise e
    finally:
        await session.close()
