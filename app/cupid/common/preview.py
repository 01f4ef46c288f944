"""
Sandpack 미리보기 번들 생성

샌드박스 자체는 브라우저의 Sandpack 이 담당하고,
여기서는 실행 시점의 base URL 을 코드에 주입하고 Sandpack 설정을 만든다.
"""

import re
from typing import Any, Dict

from cupid.common.sanitizer import WEBHOOK_PROXY_PATH, WEBHOOK_URL_PATTERN

PLACEHOLDER_APP = """export default function App() {
  return (
    <div className="flex h-screen items-center justify-center bg-gradient-to-br from-pink-500 to-purple-600">
      <div className="text-white text-2xl">Loading your experience...</div>
    </div>
  );
}"""

SANDPACK_DEPENDENCIES = {
    "react": "^19.0.0",
    "react-dom": "^19.0.0",
    "framer-motion": "^12.0.0",
    "lucide-react": "latest",
}

TAILWIND_CDN = "https://cdn.tailwindcss.com"

_ORIGIN_API_URL = re.compile(
    r"const apiUrl = typeof window !== 'undefined' \? "
    r"`\$\{window\.location\.origin\}/api/webhook-proxy` : '/api/webhook-proxy';"
)
_QUOTED_PROXY_PATH = re.compile(r"(['\"])(" + re.escape(WEBHOOK_PROXY_PATH) + r")(['\"])")


def inject_base_url(code: str, base_url: str) -> str:
    """웹훅 호출 경로를 미리보기 환경의 절대 URL 로 치환"""
    if not base_url or not code:
        return code

    base_url = base_url.rstrip("/")
    proxy_url = f"{base_url}{WEBHOOK_PROXY_PATH}"

    code = WEBHOOK_URL_PATTERN.sub(proxy_url, code)
    code = _ORIGIN_API_URL.sub(lambda _: f"const apiUrl = '{proxy_url}';", code)

    if WEBHOOK_PROXY_PATH in code and base_url not in code:
        code = _QUOTED_PROXY_PATH.sub(
            lambda m: f"{m.group(1)}{base_url}{m.group(2)}{m.group(3)}", code
        )
    return code


def build_preview(code: str, base_url: str) -> Dict[str, Any]:
    app_code = inject_base_url(code or "", base_url) or PLACEHOLDER_APP
    return {
        "template": "react-ts",
        "files": {"/App.tsx": app_code},
        "customSetup": {"dependencies": dict(SANDPACK_DEPENDENCIES)},
        "options": {
            "externalResources": [TAILWIND_CDN],
            "showNavigator": False,
            "showTabs": False,
            "showInlineErrors": True,
            "editorWidthPercentage": 0,
        },
    }
