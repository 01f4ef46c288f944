import uuid

from core.context import transaction_id_ctx
from fastapi import FastAPI, Request

TRANSACTION_ID_HEADER = "X-Transaction-Id"


def register_transaction_middleware(app: FastAPI) -> None:
    """요청마다 transaction id 를 ContextVar 에 심고 응답 헤더로 돌려준다"""

    @app.middleware("http")
    async def transaction_id_middleware(request: Request, call_next):
        transaction_id = request.headers.get(TRANSACTION_ID_HEADER) or uuid.uuid4().hex
        token = transaction_id_ctx.set(transaction_id)
        try:
            response = await call_next(request)
        finally:
            transaction_id_ctx.reset(token)
        response.headers[TRANSACTION_ID_HEADER] = transaction_id
        return response
