"""
생성된 App.tsx 후처리

모델 출력을 샌드박스(Sandpack)에서 바로 실행할 수 있도록 정리한다.
규칙은 순서에 의존한다 (뒤쪽 정규식은 앞 단계에서 펜스/라벨이 제거되었다고 가정).
어떤 규칙도 입력을 거부하지 않으며, 매칭이 없으면 그대로 통과시킨다.
"""

import re

from core.ai.output_parser import CODE_LANGUAGES, strip_code_fence

WEBHOOK_PROXY_PATH = "/api/webhook-proxy"
WEBHOOK_HOST = "connorjoejoseph.app.n8n.cloud"

_LEADING_LABEL = re.compile(
    r"\A(?:(?:typescript|tsx|javascript|jsx|js|ts)\s+)+", re.IGNORECASE
)
WEBHOOK_URL_PATTERN = re.compile(
    r"https://" + re.escape(WEBHOOK_HOST) + r"/webhook-test/[^\s\"'`]*"
)
_FETCH_LITERAL = re.compile(r"fetch\(['\"](https?://[^'\"]+)['\"]")
_SVG_BG_TEMPLATE = re.compile(
    r"backgroundImage:\s*`url\([\"']?data:image/svg\+xml[^`]+[\"']?\)`"
)
_SVG_BG_QUOTED = re.compile(
    r"backgroundImage:\s*[\"']url\([\"']?data:image/svg\+xml[^\"']+[\"']?\)[\"']"
)
_DANGLING_QUOTE = re.compile(r"(?:,[ \t]*['\"][ \t]*)+$", re.MULTILINE)
_STYLE_OBJECT = re.compile(r"style=\{\{([^}]+)\}\}")
_BG_ASSIGNMENT = re.compile(r"backgroundImage:\s*[^,}]+")
_CSS_IMPORT = re.compile(
    r"import\s+['\"](?:\./App\.css|\./styles\.css|globals\.css)['\"];?\n?"
)

NONE_BACKGROUND = "backgroundImage: 'none'"


def strip_fences(code: str) -> str:
    """1-2단계: 바깥 펜스 블록과 남은 언어 라벨 제거

    펜스가 겹쳐 온 경우도 있어 더 이상 바뀌지 않을 때까지 반복한다.
    """
    while True:
        stripped = strip_code_fence(code, CODE_LANGUAGES).strip()
        stripped = _LEADING_LABEL.sub("", stripped).strip()
        if stripped == code:
            return stripped
        code = stripped


def rewrite_webhook_urls(code: str) -> str:
    """3-4단계: 외부 웹훅 URL 을 프록시 경로로 치환"""
    code = WEBHOOK_URL_PATTERN.sub(WEBHOOK_PROXY_PATH, code)

    if WEBHOOK_PROXY_PATH not in code:

        def _replace(match: re.Match) -> str:
            if WEBHOOK_HOST in match.group(1):
                return f"fetch('{WEBHOOK_PROXY_PATH}'"
            return match.group(0)

        code = _FETCH_LITERAL.sub(_replace, code)
    return code


def neutralize_svg_backgrounds(code: str) -> str:
    """5단계: style 객체 안의 SVG data URI 배경을 none 으로"""
    code = _SVG_BG_TEMPLATE.sub(NONE_BACKGROUND, code)
    return _SVG_BG_QUOTED.sub(NONE_BACKGROUND, code)


def drop_dangling_quotes(code: str) -> str:
    """6단계: 잘린 출력의 줄 끝 `, '` 조각 제거"""
    return _DANGLING_QUOTE.sub("", code)


def repair_unbalanced_styles(code: str) -> str:
    """7단계: 따옴표 짝이 안 맞는 style 객체만 backgroundImage 무력화"""

    def _repair(match: re.Match) -> str:
        content = match.group(1)
        if content.count("'") % 2 != 0 or content.count('"') % 2 != 0:
            return "style={{" + _BG_ASSIGNMENT.sub(NONE_BACKGROUND, content) + "}}"
        return match.group(0)

    return _STYLE_OBJECT.sub(_repair, code)


def remove_css_imports(code: str) -> str:
    """8단계: 샌드박스에 존재하지 않는 스타일시트 import 제거"""
    return _CSS_IMPORT.sub("", code)


def sanitize_code(code: str) -> str:
    code = strip_fences(code)
    code = rewrite_webhook_urls(code)
    code = neutralize_svg_backgrounds(code)
    code = drop_dangling_quotes(code)
    code = repair_unbalanced_styles(code)
    code = remove_css_imports(code)
    return code.strip()
