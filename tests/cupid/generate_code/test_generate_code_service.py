import pytest
from conftest import FakeLLM
from core.ai.llm import LLMError
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from cupid.common.prompts import GENERATOR_SUFFIX, SKELETON_PROMPT
from cupid.generate_code.service.generate_code_service import GenerateCodeService

SCHEMA = {"APP_TITLE": "Tom's Digital Toy Box", "CREATOR_NAME": "Tom"}


class TestGenerateCodeService:
    async def test_generates_and_sanitizes(self) -> None:
        raw = (
            "```tsx\nimport './App.css';\n"
            "export default function App() { fetch('https://connorjoejoseph.app.n8n.cloud/webhook-test/abc'); }\n```"
        )
        llm = FakeLLM(replies=[raw])
        service = GenerateCodeService(llm_factory=lambda: llm)

        code = await service.generate(SCHEMA)

        assert code == "export default function App() { fetch('/api/webhook-proxy'); }"

        call = llm.calls[0]
        assert call["model"] == "generate-model"
        prompt = call["messages"][0]["content"]
        assert prompt.startswith(SKELETON_PROMPT)
        assert '"CREATOR_NAME": "Tom"' in prompt
        assert prompt.endswith(GENERATOR_SUFFIX)

    async def test_empty_output_is_malformed(self) -> None:
        service = GenerateCodeService(llm_factory=lambda: FakeLLM(replies=["```tsx\n```"]))

        with pytest.raises(ServiceException) as exc_info:
            await service.generate(SCHEMA)

        assert exc_info.value.error_code == ErrorCode.MALFORMED_MODEL_OUTPUT

    async def test_provider_failure(self) -> None:
        service = GenerateCodeService(
            llm_factory=lambda: FakeLLM(replies=[LLMError("timeout")])
        )

        with pytest.raises(ServiceException) as exc_info:
            await service.generate(SCHEMA)

        assert exc_info.value.error_code == ErrorCode.GENERATION_FAILED
        assert exc_info.value.status_code == 502

    async def test_non_object_schema_is_bad_request(self) -> None:
        service = GenerateCodeService(llm_factory=FakeLLM)

        with pytest.raises(ServiceException) as exc_info:
            await service.generate(["not", "an", "object"])  # type: ignore[arg-type]

        assert exc_info.value.status_code == 400
