from cupid.session.controller.dto.session_dto import SessionMessageRequestDTO
from cupid.session.domain.session_state import SessionState
from cupid.session.service.session_service import (
    SessionService,
    get_session_service,
)
from fastapi import APIRouter, Depends

router = APIRouter(prefix="/api/sessions", tags=["session"])


@router.get("/{key}", response_model=SessionState)
async def get_session_state(
    key: str, service: SessionService = Depends(get_session_service)
) -> SessionState:
    return await service.get_state(key)


@router.delete("/{key}", response_model=SessionState)
async def reset_session(
    key: str, service: SessionService = Depends(get_session_service)
) -> SessionState:
    return await service.reset(key)


@router.post("/{key}/messages", response_model=SessionState)
async def send_message(
    key: str,
    body: SessionMessageRequestDTO,
    service: SessionService = Depends(get_session_service),
) -> SessionState:
    return await service.send_message(key, body.message)


@router.post("/{key}/iterate", response_model=SessionState)
async def iterate(
    key: str,
    body: SessionMessageRequestDTO,
    service: SessionService = Depends(get_session_service),
) -> SessionState:
    return await service.iterate(key, body.message)


@router.post("/{key}/regenerate", response_model=SessionState)
async def regenerate(
    key: str, service: SessionService = Depends(get_session_service)
) -> SessionState:
    return await service.regenerate(key)


@router.post("/{key}/deploy", response_model=SessionState)
async def deploy(
    key: str, service: SessionService = Depends(get_session_service)
) -> SessionState:
    return await service.deploy(key)
