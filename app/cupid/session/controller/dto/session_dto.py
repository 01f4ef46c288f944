from dataclasses import dataclass


@dataclass(frozen=True)
class SessionMessageRequestDTO:
    message: str
