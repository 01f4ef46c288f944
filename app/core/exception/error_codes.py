from enum import Enum


class ErrorCode(Enum):
    """(코드, 기본 메시지, HTTP 상태) 묶음"""

    NOT_DEFINED = ("E0000", "Unknown error", 500)
    INTERNAL_SERVER_ERROR = ("E0001", "Internal server error", 500)
    BAD_REQUEST = ("E0002", "Bad request", 400)

    LLM_NOT_CONFIGURED = ("E1000", "Model provider is not configured", 500)
    CHAT_FAILED = ("E1001", "Failed to get response", 502)
    TRANSLATION_FAILED = ("E1002", "Failed to translate transcript", 502)
    GENERATION_FAILED = ("E1003", "Failed to generate code", 502)
    MALFORMED_MODEL_OUTPUT = (
        "E1004",
        "Failed to parse response from AI model",
        502,
    )

    EXPERIENCE_NOT_FOUND = ("E2000", "Experience not found", 404)
    DEPLOY_FAILED = ("E2001", "Failed to save experience", 500)

    SESSION_NOT_READY = ("E3000", "Session is not in a state for this action", 409)

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]

    @property
    def status_code(self) -> int:
        return self.value[2]
