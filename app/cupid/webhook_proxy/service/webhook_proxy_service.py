"""
생성된 체험의 액션 버튼 호출을 외부 n8n 웹훅으로 전달하는 프록시

샌드박스(iframe) 안에서는 외부 웹훅을 직접 호출할 수 없으므로
같은 출처의 /api/webhook-proxy 로 받아 서버에서 대신 전달한다.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from core.config import get_setting
from core.log.logging import get_logging

settings = get_setting()
logger = get_logging()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@dataclass(frozen=True)
class ProxyResult:
    status_code: int
    body: Dict[str, Any]


class WebhookProxyService:
    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url or settings.WEBHOOK_URL
        self.timeout = timeout or settings.WEBHOOK_TIMEOUT
        self.transport = transport

    async def forward(self, payload: Any) -> ProxyResult:
        """웹훅 응답 상태코드를 그대로 돌려주고, 본문은 텍스트로 감싼다"""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                resp = await client.post(self.webhook_url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Error proxying webhook request: {e}")
            return ProxyResult(
                status_code=500,
                body={"success": False, "error": str(e) or type(e).__name__},
            )

        logger.info(f"웹훅 전달 완료: {resp.status_code}")
        return ProxyResult(
            status_code=resp.status_code,
            body={"success": resp.is_success, "data": resp.text or None},
        )


# FastAPI Depends 용 DI 팩토리
def get_webhook_proxy_service() -> WebhookProxyService:
    return WebhookProxyService()
