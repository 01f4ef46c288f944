from abc import ABC, abstractmethod

from cupid.translate.domain.configuration_schema import ConfigurationSchema


class TranslateServiceABC(ABC):
    @abstractmethod
    async def translate(self, transcript: str) -> ConfigurationSchema:
        """
        대화 기록(transcript)을 Configuration Schema 로 변환합니다.
        """
        pass
