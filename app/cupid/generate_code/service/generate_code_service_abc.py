from abc import ABC, abstractmethod
from typing import Any, Dict


class GenerateCodeServiceABC(ABC):
    @abstractmethod
    async def generate(self, json_schema: Dict[str, Any]) -> str:
        """
        Configuration Schema 로 App.tsx 코드를 생성하고 샌드박스용으로 정리해 반환합니다.
        """
        pass
