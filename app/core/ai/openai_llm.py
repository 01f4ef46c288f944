from typing import Dict, List, Optional

import openai
from core.ai.llm import LLM, LLMError, ModelNames
from openai import AsyncOpenAI
from openai.types.chat.chat_completion import ChatCompletion


class OpenAILLM(LLM):
    def __init__(
        self,
        api_key: str,
        models: ModelNames,
        base_url: Optional[str] = None,
        timeout: float = 120.0,
    ):
        super().__init__(models)
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            timeout=timeout,
        )

    async def converse(
        self,
        model: str,
        system_prompt: str,
        messages: List[Dict[str, str]],
    ) -> str:
        completion = await self._create(
            model=model,
            messages=[{"role": "system", "content": system_prompt}, *messages],
        )
        return completion.choices[0].message.content or ""

    async def complete_json(self, model: str, system_prompt: str, prompt: str) -> str:
        completion = await self._create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
        )
        return completion.choices[0].message.content or ""

    async def _create(self, **kwargs) -> ChatCompletion:
        try:
            return await self.client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            raise LLMError(f"OpenAI request failed: {e}") from e
