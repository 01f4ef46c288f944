from dataclasses import dataclass


@dataclass(frozen=True)
class TranslateRequestDTO:
    transcript: str
