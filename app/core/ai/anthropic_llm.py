from typing import Dict, List

import anthropic
from core.ai.llm import (
    LLM,
    LLMError,
    ModelNames,
    drop_leading_assistant_turns,
)

JSON_ONLY_SUFFIX = "\n\nRespond with a single valid JSON object only."


class AnthropicLLM(LLM):
    def __init__(
        self,
        api_key: str,
        models: ModelNames,
        max_tokens: int = 8000,
        timeout: float = 120.0,
    ):
        super().__init__(models)
        self.client = anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout)
        self.max_tokens = max_tokens

    async def converse(
        self,
        model: str,
        system_prompt: str,
        messages: List[Dict[str, str]],
    ) -> str:
        return await self._create(
            model, system_prompt, drop_leading_assistant_turns(messages)
        )

    async def complete_json(self, model: str, system_prompt: str, prompt: str) -> str:
        # Claude 는 JSON 모드가 없으므로 시스템 프롬프트로 강제
        return await self._create(
            model,
            system_prompt + JSON_ONLY_SUFFIX,
            [{"role": "user", "content": prompt}],
        )

    async def _create(
        self, model: str, system_prompt: str, messages: List[Dict[str, str]]
    ) -> str:
        try:
            message = await self.client.messages.create(
                model=model,
                max_tokens=self.max_tokens,
                system=system_prompt,
                messages=messages,
            )
        except anthropic.AnthropicError as e:
            raise LLMError(f"Anthropic request failed: {e}") from e

        content = ""
        for block in message.content:
            if block.type == "text":
                content += block.text
        return content
