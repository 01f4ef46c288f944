from cupid.common.sanitizer import WEBHOOK_PROXY_PATH
from cupid.webhook_proxy.service.webhook_proxy_service import (
    CORS_HEADERS,
    WebhookProxyService,
    get_webhook_proxy_service,
)
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

router = APIRouter(tags=["webhook_proxy"])


@router.post(WEBHOOK_PROXY_PATH)
async def webhook_proxy(
    request: Request,
    service: WebhookProxyService = Depends(get_webhook_proxy_service),
) -> JSONResponse:
    try:
        payload = await request.json()
    except ValueError as e:
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": f"Invalid JSON body: {e}"},
            headers=CORS_HEADERS,
        )

    result = await service.forward(payload)
    return JSONResponse(
        status_code=result.status_code, content=result.body, headers=CORS_HEADERS
    )


@router.options(WEBHOOK_PROXY_PATH)
async def webhook_proxy_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)
