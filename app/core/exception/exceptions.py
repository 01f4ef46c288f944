from typing import Optional

from core.exception.error_codes import ErrorCode


class ServiceException(Exception):
    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message or error_code.message)
        self.error_code = error_code
        self.message = message or error_code.message
        self.details = details

    @property
    def status_code(self) -> int:
        return self.error_code.status_code
