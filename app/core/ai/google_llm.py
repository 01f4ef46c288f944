import asyncio
from typing import Dict, List

import httpx
from core.ai.llm import LLM, LLMError, ModelNames, drop_leading_assistant_turns
from google import genai
from google.genai import errors, types


class GoogleLLM(LLM):
    def __init__(self, api_key: str, models: ModelNames, timeout: float = 120.0):
        super().__init__(models)
        self.client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout * 1000)),
        )

    async def converse(
        self,
        model: str,
        system_prompt: str,
        messages: List[Dict[str, str]],
    ) -> str:
        # Gemini 는 history 가 user 턴으로 시작해야 한다
        contents = [
            types.Content(
                role="model" if m["role"] == "assistant" else "user",
                parts=[types.Part(text=m["content"])],
            )
            for m in drop_leading_assistant_turns(messages)
        ]
        return await self._generate(
            model,
            contents,
            types.GenerateContentConfig(system_instruction=system_prompt),
        )

    async def complete_json(self, model: str, system_prompt: str, prompt: str) -> str:
        return await self._generate(
            model,
            prompt,
            types.GenerateContentConfig(
                system_instruction=system_prompt,
                response_mime_type="application/json",
            ),
        )

    async def _generate(self, model: str, contents, config) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            raise LLMError(f"Gemini request failed: {e}") from e
        # 연결 실패, 타임아웃은 APIError 로 감싸지지 않고 그대로 올라온다
        except (httpx.HTTPError, asyncio.TimeoutError) as e:
            raise LLMError(f"Gemini request failed: {e!r}") from e
        return response.text or ""
