"""
LLM 출력 정리 유틸리티

모델이 코드/JSON 을 ``` 펜스로 감싸서 돌려주는 경우가 많아
번역(JSON)·완료 판정(JSON)·코드 생성(TSX) 모두 이 모듈 하나로 펜스를 벗긴다.
"""

import json
import re
from typing import Any, Dict, Sequence

JSON_LANGUAGES = ("json",)
CODE_LANGUAGES = ("tsx", "typescript", "ts", "jsx", "javascript", "js")


class MalformedOutputError(ValueError):
    """모델 응답이 기대한 형식으로 파싱되지 않음"""


def _language_group(languages: Sequence[str]) -> str:
    # 긴 태그를 먼저 매칭해야 "tsx" 가 "ts" + "x" 로 잘리지 않는다
    ordered = sorted(languages, key=len, reverse=True)
    return "(?:" + "|".join(re.escape(lang) for lang in ordered) + ")"


def strip_code_fence(text: str, languages: Sequence[str] = CODE_LANGUAGES) -> str:
    """
    바깥 ``` 블록 하나를 벗긴다.

    전체가 하나의 펜스 블록이면 내용만 반환하고,
    아니면 앞/뒤에 남은 펜스 조각을 각각 독립적으로 제거한다.
    """
    text = text.strip()
    lang = _language_group(languages)

    block = re.match(
        rf"\A```{lang}?[ \t]*\n?(.*?)\n?```\Z", text, re.DOTALL | re.IGNORECASE
    )
    if block:
        return block.group(1)

    text = re.sub(rf"\A```{lang}?[ \t]*\n?", "", text, flags=re.IGNORECASE)
    text = re.sub(r"\n?```\Z", "", text)
    return text


def parse_json_object(text: str) -> Dict[str, Any]:
    """펜스를 벗긴 뒤 JSON 객체로 파싱. 객체가 아니면 MalformedOutputError"""
    cleaned = strip_code_fence(text or "", JSON_LANGUAGES).strip()
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedOutputError(f"Invalid JSON from model: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedOutputError(
            f"Expected a JSON object from model, got {type(parsed).__name__}"
        )
    return parsed
