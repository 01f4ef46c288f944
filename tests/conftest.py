from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Generator, List, Optional

import pytest
from core.ai.llm import LLM, LLMError, ModelNames
from core.ai.llm_factory import get_llm_factory
from core.db.connection import get_session
from core.db.model.base import Base
from core.exception.handlers import register_exception_handlers
from cupid.session.repository.session_store import SessionStore, get_session_store
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from web.router import router

# Experience 모델을 메타데이터에 등록
import cupid.experience.domain.experience  # noqa: F401

TEST_MODELS = ModelNames(
    chat="chat-model",
    check="check-model",
    translate="translate-model",
    generate="generate-model",
)


class FakeLLM(LLM):
    """
    스크립트된 응답을 순서대로 돌려주는 LLM

    응답 자리에 Exception 인스턴스를 넣으면 해당 호출에서 raise 한다.
    """

    def __init__(
        self,
        replies: Optional[List[Any]] = None,
        json_replies: Optional[List[Any]] = None,
    ):
        super().__init__(TEST_MODELS)
        self.replies = list(replies or [])
        self.json_replies = list(json_replies or [])
        self.calls: List[Dict[str, Any]] = []

    @staticmethod
    def _next(queue: List[Any]) -> str:
        if not queue:
            raise LLMError("no scripted reply left")
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def converse(self, model, system_prompt, messages) -> str:
        self.calls.append(
            {
                "kind": "converse",
                "model": model,
                "system_prompt": system_prompt,
                "messages": messages,
            }
        )
        return self._next(self.replies)

    async def complete_json(self, model, system_prompt, prompt) -> str:
        self.calls.append(
            {
                "kind": "json",
                "model": model,
                "system_prompt": system_prompt,
                "prompt": prompt,
            }
        )
        return self._next(self.json_replies)


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


def make_memory_engine() -> AsyncEngine:
    # 메모리 sqlite 는 커넥션마다 DB 가 달라지므로 StaticPool 로 하나만 공유
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker, None]:
    engine = make_memory_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    session = session_maker()
    try:
        yield session
    finally:
        await session.close()


@pytest.fixture
def session_store(tmp_path) -> SessionStore:
    return SessionStore(str(tmp_path / "sessions"))


@pytest.fixture
def test_app(session_store) -> FastAPI:
    # main.py 는 실제 DB 파일을 초기화하므로 라우터만 직접 마운트.
    # 엔진은 TestClient 의 이벤트 루프 안(lifespan)에서 처음 연결된다.
    engine = make_memory_engine()
    maker = async_sessionmaker(bind=engine, expire_on_commit=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(lifespan=lifespan)
    register_exception_handlers(app)
    app.include_router(router)

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        session = maker()
        try:
            yield session
        finally:
            await session.close()

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_store] = lambda: session_store
    return app


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app, raise_server_exceptions=False) as test_client:
        yield test_client


def use_fake_llm(app: FastAPI, llm: FakeLLM) -> FakeLLM:
    """서비스 DI 팩토리가 주입받는 LLM 팩토리를 FakeLLM 으로 교체"""
    app.dependency_overrides[get_llm_factory] = lambda: (lambda: llm)
    return llm
