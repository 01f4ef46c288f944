"""
번역 결과(Configuration Schema) 모델

모델 출력에 키가 빠지거나 null/빈 값이 오면 나머지 값과 어울리는 기본값으로 채운다.
어떤 키도 생략되지 않는다.
"""

import re
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, model_validator

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")

DEFAULT_PRIMARY_BG_HEX = "#0A0A0A"
DEFAULT_SECONDARY_BG_HEX = "#FFEB3B"
DEFAULT_TEXT_COLOR_HEX = "#FFFFFF"

DEFAULT_ACTION_BUTTONS = [
    {
        "label": "Dress Me",
        "action": "dress_up",
        "description": "Swap the avatar into a brand new outfit",
    },
    {
        "label": "Serenade Me",
        "action": "serenade",
        "description": "The avatar sings a little love song",
    },
    {
        "label": "Whisper to Me",
        "action": "whisper",
        "description": "The avatar leans in with a secret message",
    },
    {
        "label": "Hug Me",
        "action": "hug",
        "description": "The avatar opens its arms for a hug",
    },
]

ORBIT_BUTTON_COUNT = 4

STRING_FIELDS = (
    "APP_TITLE",
    "THEME_NAME",
    "VISUAL_MOTIF",
    "CENTRAL_COMPONENT_ARCHITECTURE",
    "RECIPIENT_NAME",
    "CREATOR_NAME",
    "VIBE",
    "STATUS_TEXT",
)
HEX_FIELDS = ("PRIMARY_BG_HEX", "SECONDARY_BG_HEX", "TEXT_COLOR_HEX")


def _clean_str(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _clean_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [item for item in (_clean_str(v) for v in value) if item]


def normalize_hex(value: Any) -> str:
    """#RRGGBB 로 정규화, 형식이 아니면 빈 문자열"""
    match = HEX_PATTERN.match(_clean_str(value))
    if not match:
        return ""
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def _snake_case(label: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", label.lower()).strip("_") or "action"


class ActionButton(BaseModel):
    label: str
    action: str
    description: str


class Preferences(BaseModel):
    colors: List[str]
    aesthetics: List[str]
    interests: List[str]


class ConfigurationSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    APP_TITLE: str
    THEME_NAME: str
    PRIMARY_BG_HEX: str
    SECONDARY_BG_HEX: str
    TEXT_COLOR_HEX: str
    VISUAL_MOTIF: str
    CENTRAL_COMPONENT_ARCHITECTURE: str
    RECIPIENT_NAME: str
    CREATOR_NAME: str
    VIBE: str
    INSIDE_JOKES: List[str]
    PREFERENCES: Preferences
    STATUS_TEXT: str
    ACTION_BUTTONS: List[ActionButton]

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            data = data.model_dump()
        raw = data if isinstance(data, dict) else {}
        values: Dict[str, Any] = {key: _clean_str(raw.get(key)) for key in STRING_FIELDS}
        values.update({key: normalize_hex(raw.get(key)) for key in HEX_FIELDS})

        creator = values["CREATOR_NAME"] or "Your Secret Admirer"
        recipient = values["RECIPIENT_NAME"] or "My Favorite Person"
        values["CREATOR_NAME"] = creator
        values["RECIPIENT_NAME"] = recipient
        values["APP_TITLE"] = values["APP_TITLE"] or f"{creator}'s Digital Toy Box"
        values["THEME_NAME"] = values["THEME_NAME"] or "Neon Designer Workshop"
        values["VISUAL_MOTIF"] = (
            values["VISUAL_MOTIF"] or "High-gloss vinyl with neon rim lighting"
        )
        values["CENTRAL_COMPONENT_ARCHITECTURE"] = (
            values["CENTRAL_COMPONENT_ARCHITECTURE"] or "Floating holographic pedestal"
        )
        values["VIBE"] = values["VIBE"] or "Playful and bold"
        values["STATUS_TEXT"] = (
            values["STATUS_TEXT"] or f"Awaiting your command, {recipient}"
        )
        values["PRIMARY_BG_HEX"] = values["PRIMARY_BG_HEX"] or DEFAULT_PRIMARY_BG_HEX
        values["SECONDARY_BG_HEX"] = (
            values["SECONDARY_BG_HEX"] or DEFAULT_SECONDARY_BG_HEX
        )
        values["TEXT_COLOR_HEX"] = values["TEXT_COLOR_HEX"] or DEFAULT_TEXT_COLOR_HEX

        values["INSIDE_JOKES"] = _clean_str_list(raw.get("INSIDE_JOKES")) or [
            f"{creator} and {recipient}: partners in mischief"
        ]

        preferences = raw.get("PREFERENCES")
        preferences = preferences if isinstance(preferences, dict) else {}
        values["PREFERENCES"] = {
            "colors": _clean_str_list(preferences.get("colors"))
            or [values["PRIMARY_BG_HEX"], values["SECONDARY_BG_HEX"]],
            "aesthetics": _clean_str_list(preferences.get("aesthetics"))
            or [values["VISUAL_MOTIF"]],
            "interests": _clean_str_list(preferences.get("interests"))
            or [values["VIBE"]],
        }

        values["ACTION_BUTTONS"] = cls._action_buttons(raw.get("ACTION_BUTTONS"))
        return values

    @staticmethod
    def _action_buttons(value: Any) -> List[Dict[str, str]]:
        buttons: List[Dict[str, str]] = []
        for item in value if isinstance(value, list) else []:
            if isinstance(item, str):
                item = {"label": item}
            if not isinstance(item, dict):
                continue
            label = _clean_str(item.get("label"))
            if not label:
                continue
            buttons.append(
                {
                    "label": label,
                    "action": _clean_str(item.get("action")) or _snake_case(label),
                    "description": _clean_str(item.get("description"))
                    or f"{label} with the avatar",
                }
            )

        # 오비트 레이아웃은 버튼 4개 기준 - 부족하면 기본 버튼으로 채운다
        used = {b["label"].lower() for b in buttons}
        for default in DEFAULT_ACTION_BUTTONS:
            if len(buttons) >= ORBIT_BUTTON_COUNT:
                break
            if default["label"].lower() not in used:
                buttons.append(dict(default))
        return buttons
