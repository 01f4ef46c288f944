from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PreviewRequestDTO:
    code: str = ""
    base_url: Optional[str] = None
