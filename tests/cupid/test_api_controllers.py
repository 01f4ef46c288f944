from unittest.mock import patch

from conftest import FakeLLM, use_fake_llm
from core.ai.llm import LLMError
from cupid.chat.domain.completion_check import ChatReply, CompletionCheck
from cupid.translate.domain.configuration_schema import ConfigurationSchema
from fastapi import FastAPI
from fastapi.testclient import TestClient


class TestChatController:
    def test_cupid_chat_e2e_with_mock(self, client: TestClient) -> None:
        # Given
        payload = {
            "messages": [
                {"role": "model", "parts": [{"text": "Who's the lucky person?"}]},
                {"role": "user", "parts": [{"text": "Sam"}]},
            ],
            "systemInstruction": "You are Cupid.",
        }
        reply = ChatReply(
            response="Love it!",
            completion=CompletionCheck(False, ["sender name"]),
        )

        # When
        with patch(
            "cupid.chat.service.chat_service.ChatService.reply",
            return_value=reply,
        ) as mocked:
            response = client.post("/api/cupid-chat", json=payload)

        # Then
        assert response.status_code == 200
        assert response.json() == {
            "response": "Love it!",
            "isComplete": False,
            "missingTopics": ["sender name"],
        }
        turns, system_instruction = mocked.call_args.args
        assert [t.role.value for t in turns] == ["assistant", "user"]
        assert system_instruction == "You are Cupid."

    def test_missing_messages_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/api/cupid-chat", json={})

        assert response.status_code == 400
        assert response.json()["code"] == "E0002"

    def test_provider_failure_is_502(self, test_app: FastAPI, client: TestClient) -> None:
        use_fake_llm(test_app, FakeLLM(replies=[LLMError("quota")]))

        response = client.post(
            "/api/cupid-chat", json={"messages": [{"role": "user", "content": "hi"}]}
        )

        assert response.status_code == 502
        assert response.json()["error"] == "Failed to get response"

    def test_unconfigured_provider_is_500(self, client: TestClient) -> None:
        with patch("core.ai.llm_factory.settings.MODEL_PROVIDER", "NOPE"):
            response = client.post(
                "/api/cupid-chat",
                json={"messages": [{"role": "user", "content": "hi"}]},
            )

        assert response.status_code == 500
        assert response.json()["code"] == "E1000"


class TestTranslateController:
    def test_translate_returns_full_schema(self, client: TestClient) -> None:
        schema = ConfigurationSchema.model_validate({"CREATOR_NAME": "Tom"})

        with patch(
            "cupid.translate.service.translate_service.TranslateService.translate",
            return_value=schema,
        ):
            response = client.post("/api/translate", json={"transcript": "User: hi"})

        assert response.status_code == 200
        assert response.json()["APP_TITLE"] == "Tom's Digital Toy Box"
        assert len(response.json()["ACTION_BUTTONS"]) == 4

    def test_empty_transcript_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/api/translate", json={"transcript": ""})
        assert response.status_code == 400

    def test_malformed_model_output_is_502(
        self, test_app: FastAPI, client: TestClient
    ) -> None:
        use_fake_llm(test_app, FakeLLM(json_replies=["I could not do that"]))

        response = client.post("/api/translate", json={"transcript": "User: hi"})

        assert response.status_code == 502
        assert response.json()["code"] == "E1004"


class TestGenerateCodeController:
    def test_generate_code(self, test_app: FastAPI, client: TestClient) -> None:
        fenced = "```tsx\nexport default function App() {}\n```"
        use_fake_llm(test_app, FakeLLM(replies=[fenced]))

        response = client.post("/api/generate-code", json={"jsonSchema": {"A": 1}})

        assert response.status_code == 200
        assert response.json() == {"code": "export default function App() {}"}

    def test_non_object_schema_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/api/generate-code", json={"jsonSchema": "nope"})
        assert response.status_code == 400


class TestPreviewAndHealth:
    def test_preview_bundle(self, client: TestClient) -> None:
        response = client.post(
            "/api/preview",
            json={"code": "fetch('/api/webhook-proxy')", "base_url": "https://x.dev"},
        )

        assert response.status_code == 200
        assert (
            response.json()["files"]["/App.tsx"]
            == "fetch('https://x.dev/api/webhook-proxy')"
        )

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        assert "timestamp" in response.json()
