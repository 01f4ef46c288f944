from cupid.chat.controller.dto.chat_dto import ChatRequestDTO, ChatResponseDTO
from cupid.chat.service.chat_service import ChatService, get_chat_service
from fastapi import APIRouter, Depends

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/cupid-chat", response_model=ChatResponseDTO, response_model_by_alias=True
)
async def cupid_chat(
    body: ChatRequestDTO,
    service: ChatService = Depends(get_chat_service),
) -> ChatResponseDTO:
    reply = await service.reply(body.messages, body.system_instruction)
    return ChatResponseDTO(
        response=reply.response,
        is_complete=reply.is_complete,
        missing_topics=reply.completion.missing_topics,
    )
