import asyncio
from functools import partial
from typing import Any, Callable, Optional

from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from cupid.chat.domain.turn import render_transcript
from cupid.chat.service.chat_service import ChatService, get_chat_service
from cupid.experience.service.experience_service import (
    ExperienceService,
    get_experience_service,
)
from cupid.generate_code.service.generate_code_service import (
    GenerateCodeService,
    get_generate_code_service,
)
from cupid.session.domain.session_state import (
    SESSION_KEY_PATTERN,
    SessionMode,
    SessionState,
)
from cupid.session.domain.transitions import (
    AssistantReplied,
    ChatFailed,
    CodeGenerated,
    Deployed,
    GenerationFailed,
    GenerationStarted,
    Reset,
    SchemaTranslated,
    UserMessageSent,
)
from cupid.session.repository.session_store import SessionStore, get_session_store
from cupid.translate.service.translate_service import (
    TranslateService,
    get_translate_service,
)
from fastapi import Depends

logger = get_logging()


class SessionService:
    """
    서버 측 빌더 세션

    채팅 -> (완료 시) 번역 -> 코드 생성 -> 편집, 편집 중 반복 요청과 배포를 처리한다.
    체인 중간에 실패하면 직전 모드(chatting/editing)로 돌아가고
    이미 저장된 값(스키마 등)은 그대로 둔 채 오류를 그대로 올린다.
    """

    def __init__(
        self,
        store: SessionStore,
        chat_service: ChatService,
        translate_service: TranslateService,
        generate_code_service: GenerateCodeService,
        experience_service: Optional[ExperienceService] = None,
    ):
        self.store = store
        self.chat_service = chat_service
        self.translate_service = translate_service
        self.generate_code_service = generate_code_service
        self.experience_service = experience_service

    async def get_state(self, key: str) -> SessionState:
        self._check_key(key)
        state = await self._in_thread(self.store.load, key)
        if state is None:
            state = SessionState.new(key)
            await self._in_thread(self.store.save, state)
        return state

    async def reset(self, key: str) -> SessionState:
        self._check_key(key)
        await self._in_thread(self.store.delete, key)
        return await self._dispatch(SessionState.new(key), Reset())

    async def send_message(self, key: str, message: str) -> SessionState:
        message = (message or "").strip()
        if not message:
            raise ServiceException(ErrorCode.BAD_REQUEST, message="Message is required")

        state = await self.get_state(key)
        self._require_mode(state, SessionMode.CHATTING)

        state = await self._dispatch(state, UserMessageSent(message))
        try:
            reply = await self.chat_service.reply(state.transcript)
        except Exception:
            await self._dispatch(state, ChatFailed())
            raise

        state = await self._dispatch(
            state,
            AssistantReplied(
                reply.response,
                is_complete=reply.is_complete,
                missing_topics=reply.completion.missing_topics,
            ),
        )
        if not state.is_complete:
            return state

        logger.info(f"session {key}: 정보 수집 완료, 체험 생성 시작")
        return await self._build(
            state, render_transcript(state.transcript), SessionMode.CHATTING
        )

    async def iterate(self, key: str, message: str) -> SessionState:
        message = (message or "").strip()
        if not message:
            raise ServiceException(ErrorCode.BAD_REQUEST, message="Message is required")

        state = await self.get_state(key)
        self._require_mode(state, SessionMode.EDITING)
        if not state.json_schema:
            raise ServiceException(
                ErrorCode.SESSION_NOT_READY, details="No schema to iterate on"
            )

        # 반복 요청은 번역 입력에만 덧붙이고 대화 기록은 건드리지 않는다
        transcript = (
            f"{render_transcript(state.transcript)}\n\nIteration request: {message}"
        )
        return await self._build(state, transcript, SessionMode.EDITING)

    async def regenerate(self, key: str) -> SessionState:
        state = await self.get_state(key)
        fallback = SessionMode.EDITING if state.code else SessionMode.CHATTING

        if state.json_schema:
            return await self._generate(state, fallback)
        if state.has_user_turns():
            return await self._build(
                state, render_transcript(state.transcript), fallback
            )
        raise ServiceException(
            ErrorCode.SESSION_NOT_READY, details="Nothing to generate from yet"
        )

    async def deploy(self, key: str) -> SessionState:
        state = await self.get_state(key)
        if not state.code:
            raise ServiceException(
                ErrorCode.SESSION_NOT_READY, details="No generated code to deploy"
            )
        if self.experience_service is None:
            raise ServiceException(
                ErrorCode.DEPLOY_FAILED, details="Experience store is not available"
            )

        result = await self.experience_service.deploy(state.code, state.json_schema)
        return await self._dispatch(state, Deployed(result.url))

    async def _build(
        self, state: SessionState, transcript: str, fallback: SessionMode
    ) -> SessionState:
        state = await self._dispatch(state, GenerationStarted())
        try:
            schema = await self.translate_service.translate(transcript)
        except Exception:
            await self._dispatch(state, GenerationFailed(fallback))
            raise

        state = await self._dispatch(state, SchemaTranslated(schema.model_dump()))
        return await self._generate(state, fallback)

    async def _generate(
        self, state: SessionState, fallback: SessionMode
    ) -> SessionState:
        if state.mode != SessionMode.GENERATING:
            state = await self._dispatch(state, GenerationStarted())
        try:
            code = await self.generate_code_service.generate(state.json_schema or {})
        except Exception:
            await self._dispatch(state, GenerationFailed(fallback))
            raise
        return await self._dispatch(state, CodeGenerated(code))

    async def _dispatch(self, state: SessionState, event: Any) -> SessionState:
        return await self._in_thread(self.store.dispatch, state, event)

    @staticmethod
    async def _in_thread(func: Callable[..., Any], *args: Any) -> Any:
        # 세션 파일 IO 는 스레드 풀에서 실행해 이벤트 루프를 막지 않는다
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args))

    @staticmethod
    def _check_key(key: str) -> None:
        if not SESSION_KEY_PATTERN.match(key or ""):
            raise ServiceException(
                ErrorCode.BAD_REQUEST, message="Invalid session key"
            )

    @staticmethod
    def _require_mode(state: SessionState, mode: SessionMode) -> None:
        if state.mode != mode:
            raise ServiceException(
                ErrorCode.SESSION_NOT_READY,
                details=f"Session is {state.mode.value}, expected {mode.value}",
            )


# FastAPI Depends 용 DI 팩토리
def get_session_service(
    store: SessionStore = Depends(get_session_store),
    chat_service: ChatService = Depends(get_chat_service),
    translate_service: TranslateService = Depends(get_translate_service),
    generate_code_service: GenerateCodeService = Depends(get_generate_code_service),
    experience_service: ExperienceService = Depends(get_experience_service),
) -> SessionService:
    return SessionService(
        store,
        chat_service,
        translate_service,
        generate_code_service,
        experience_service,
    )
