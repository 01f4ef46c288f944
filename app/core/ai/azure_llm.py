from core.ai.llm import ModelNames
from core.ai.openai_llm import OpenAILLM
from openai import AsyncAzureOpenAI


class AzureLLM(OpenAILLM):
    """Azure OpenAI - 모델명 자리에 deployment 이름을 넘긴다"""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        api_version: str,
        models: ModelNames,
        timeout: float = 120.0,
    ):
        self.models = models
        self.client = AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=base_url,
            api_version=api_version,
            timeout=timeout,
        )
