import json

import httpx
import pytest
from conftest import FakeLLM, use_fake_llm
from core.ai.llm import LLMError
from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from cupid.chat.service.chat_service import ChatService
from cupid.experience.service.deploy_result import DeployResult
from cupid.generate_code.service.generate_code_service import GenerateCodeService
from cupid.session.domain.session_state import SessionMode
from cupid.session.service.session_service import SessionService
from cupid.translate.service.translate_service import TranslateService
from fastapi import FastAPI
from fastapi.testclient import TestClient

SCHEMA_JSON = json.dumps({"CREATOR_NAME": "Tom", "RECIPIENT_NAME": "Sam"})
APP = "export default function App() {}"
COMPLETE = '{"hasEnoughInfo": true, "missingPoints": []}'
INCOMPLETE = '{"hasEnoughInfo": false, "missingPoints": ["sender vibe/personality"]}'


class FakeExperienceService:
    def __init__(self) -> None:
        self.deployed = []

    async def deploy(self, code, json_schema=None) -> DeployResult:
        self.deployed.append((code, json_schema))
        return DeployResult(id="1234", url="http://localhost:3000/share/1234")


def make_service(session_store, llm: FakeLLM, experience_service=None) -> SessionService:
    factory = lambda: llm  # noqa: E731
    return SessionService(
        session_store,
        ChatService(factory),
        TranslateService(factory),
        GenerateCodeService(factory),
        experience_service,
    )


class TestSessionService:
    async def test_get_creates_and_persists_new_session(self, session_store) -> None:
        service = make_service(session_store, FakeLLM())

        state = await service.get_state("tab-1")

        assert state.mode == SessionMode.CHATTING
        assert session_store.load("tab-1").model_dump() == state.model_dump()

    async def test_invalid_key_is_bad_request(self, session_store) -> None:
        service = make_service(session_store, FakeLLM())

        with pytest.raises(ServiceException) as exc_info:
            await service.get_state("../etc/passwd")

        assert exc_info.value.status_code == 400

    async def test_incomplete_chat_stays_chatting(self, session_store) -> None:
        llm = FakeLLM(replies=["Tell me more!"], json_replies=[INCOMPLETE])
        service = make_service(session_store, llm)

        state = await service.send_message("tab-1", "It's for Sam")

        assert state.mode == SessionMode.CHATTING
        assert [t.content for t in state.transcript[1:]] == [
            "It's for Sam",
            "Tell me more!",
        ]
        assert state.missing_topics == ["sender vibe/personality"]
        assert session_store.load("tab-1").model_dump() == state.model_dump()

    async def test_complete_chat_builds_experience(self, session_store) -> None:
        llm = FakeLLM(
            replies=["All set!", f"```tsx\n{APP}\n```"],
            json_replies=[COMPLETE, SCHEMA_JSON],
        )
        service = make_service(session_store, llm)

        state = await service.send_message("tab-1", "I'm Tom, it's for Sam")

        assert state.mode == SessionMode.EDITING
        assert state.code == APP
        assert state.json_schema["APP_TITLE"] == "Tom's Digital Toy Box"
        assert session_store.load("tab-1").mode == SessionMode.EDITING

        translate_call = llm.calls[2]
        assert "User: I'm Tom, it's for Sam\n\nCupid: All set!" in translate_call["prompt"]

    async def test_translation_failure_returns_to_chatting(self, session_store) -> None:
        llm = FakeLLM(
            replies=["All set!"],
            json_replies=[COMPLETE, LLMError("quota")],
        )
        service = make_service(session_store, llm)

        with pytest.raises(ServiceException) as exc_info:
            await service.send_message("tab-1", "I'm Tom")

        assert exc_info.value.error_code == ErrorCode.TRANSLATION_FAILED
        state = session_store.load("tab-1")
        assert state.mode == SessionMode.CHATTING
        assert state.is_complete is False
        assert state.transcript[-1].content == "All set!"

    async def test_generation_failure_keeps_schema(self, session_store) -> None:
        llm = FakeLLM(
            replies=["All set!", LLMError("timeout")],
            json_replies=[COMPLETE, SCHEMA_JSON],
        )
        service = make_service(session_store, llm)

        with pytest.raises(ServiceException):
            await service.send_message("tab-1", "I'm Tom")

        state = session_store.load("tab-1")
        assert state.mode == SessionMode.CHATTING
        assert state.json_schema["CREATOR_NAME"] == "Tom"
        assert state.code == ""

    async def test_chat_failure_records_apology(self, session_store) -> None:
        service = make_service(session_store, FakeLLM(replies=[LLMError("down")]))

        with pytest.raises(ServiceException) as exc_info:
            await service.send_message("tab-1", "hello")

        assert exc_info.value.error_code == ErrorCode.CHAT_FAILED
        state = session_store.load("tab-1")
        assert [t.content for t in state.transcript[1:]] == [
            "hello",
            "Oops! Something went wrong. Let's try that again?",
        ]

    async def test_transport_error_in_translation_returns_to_chatting(
        self, session_store
    ) -> None:
        llm = FakeLLM(
            replies=["All set!", "Anything else?"],
            json_replies=[COMPLETE, httpx.ReadTimeout("read timed out"), INCOMPLETE],
        )
        service = make_service(session_store, llm)

        with pytest.raises(httpx.ReadTimeout):
            await service.send_message("tab-1", "I'm Tom")

        assert session_store.load("tab-1").mode == SessionMode.CHATTING
        state = await service.send_message("tab-1", "One more thing")
        assert state.mode == SessionMode.CHATTING
        assert state.transcript[-1].content == "Anything else?"

    async def test_transport_error_in_chat_records_apology(self, session_store) -> None:
        service = make_service(
            session_store, FakeLLM(replies=[httpx.ConnectError("refused")])
        )

        with pytest.raises(httpx.ConnectError):
            await service.send_message("tab-1", "hello")

        state = session_store.load("tab-1")
        assert state.mode == SessionMode.CHATTING
        assert state.transcript[-1].content == (
            "Oops! Something went wrong. Let's try that again?"
        )

    async def test_regenerate_from_stored_schema(self, session_store) -> None:
        llm = FakeLLM(
            replies=["All set!", LLMError("timeout"), APP],
            json_replies=[COMPLETE, SCHEMA_JSON],
        )
        service = make_service(session_store, llm)
        with pytest.raises(ServiceException):
            await service.send_message("tab-1", "I'm Tom")

        state = await service.regenerate("tab-1")

        assert state.mode == SessionMode.EDITING
        assert state.code == APP
        # 번역은 다시 호출하지 않는다
        assert [c["kind"] for c in llm.calls].count("json") == 2

    async def test_iterate_appends_request_to_translation_only(
        self, session_store
    ) -> None:
        llm = FakeLLM(
            replies=["All set!", APP, "export default function App2() {}"],
            json_replies=[COMPLETE, SCHEMA_JSON, SCHEMA_JSON],
        )
        service = make_service(session_store, llm)
        before = await service.send_message("tab-1", "I'm Tom")

        state = await service.iterate("tab-1", "Make it pink")

        assert state.code == "export default function App2() {}"
        assert [t.model_dump() for t in state.transcript] == [
            t.model_dump() for t in before.transcript
        ]
        assert llm.calls[-2]["prompt"].count("Iteration request: Make it pink") == 1

    async def test_iterate_requires_editing(self, session_store) -> None:
        service = make_service(session_store, FakeLLM())

        with pytest.raises(ServiceException) as exc_info:
            await service.iterate("tab-1", "Make it pink")

        assert exc_info.value.error_code == ErrorCode.SESSION_NOT_READY

    async def test_deploy_stores_share_url(self, session_store) -> None:
        llm = FakeLLM(replies=["All set!", APP], json_replies=[COMPLETE, SCHEMA_JSON])
        experiences = FakeExperienceService()
        service = make_service(session_store, llm, experiences)
        await service.send_message("tab-1", "I'm Tom")

        state = await service.deploy("tab-1")

        assert state.share_url == "http://localhost:3000/share/1234"
        assert experiences.deployed[0][0] == APP
        assert experiences.deployed[0][1]["CREATOR_NAME"] == "Tom"

    async def test_deploy_without_code(self, session_store) -> None:
        service = make_service(session_store, FakeLLM(), FakeExperienceService())

        with pytest.raises(ServiceException) as exc_info:
            await service.deploy("tab-1")

        assert exc_info.value.status_code == 409

    async def test_reset(self, session_store) -> None:
        service = make_service(
            session_store, FakeLLM(replies=["hi"], json_replies=[INCOMPLETE])
        )
        await service.send_message("tab-1", "hello")

        state = await service.reset("tab-1")

        assert len(state.transcript) == 1
        assert session_store.load("tab-1").model_dump() == state.model_dump()


class TestSessionController:
    def test_full_flow_over_http(self, test_app: FastAPI, client: TestClient) -> None:
        use_fake_llm(
            test_app,
            FakeLLM(
                replies=["All set!", APP],
                json_replies=[COMPLETE, SCHEMA_JSON],
            ),
        )

        created = client.get("/api/sessions/tab-1")
        assert created.status_code == 200
        assert created.json()["mode"] == "chatting"

        built = client.post("/api/sessions/tab-1/messages", json={"message": "I'm Tom"})
        assert built.status_code == 200
        assert built.json()["mode"] == "editing"
        assert built.json()["code"] == APP

        deployed = client.post("/api/sessions/tab-1/deploy")
        assert deployed.status_code == 200
        share_url = deployed.json()["share_url"]
        share_id = share_url.rsplit("/", 1)[-1]

        shared = client.get(f"/share/{share_id}")
        assert shared.status_code == 200
        assert shared.json()["preview"]["files"]["/App.tsx"] == APP

        reset = client.delete("/api/sessions/tab-1")
        assert reset.json()["mode"] == "chatting"
        assert reset.json()["code"] == ""

    def test_session_endpoints_work_without_llm_keys(self, client: TestClient) -> None:
        response = client.get("/api/sessions/fresh")
        assert response.status_code == 200

    def test_iterate_before_generation_is_conflict(self, client: TestClient) -> None:
        response = client.post("/api/sessions/tab-2/iterate", json={"message": "pink"})

        assert response.status_code == 409
        assert response.json()["code"] == "E3000"

    def test_transcript_to_sanitized_code_over_http(
        self, test_app: FastAPI, client: TestClient
    ) -> None:
        generated = (
            "export default function App() {\n"
            "  const send = () => fetch('https://connorjoejoseph.app.n8n.cloud/webhook-test/abc123');\n"
            "  return <button onClick={send}>Go</button>;\n"
            "}"
        )
        llm = use_fake_llm(
            test_app,
            FakeLLM(
                replies=["Who's the lucky one?", "All set!", generated],
                json_replies=[
                    INCOMPLETE,
                    COMPLETE,
                    json.dumps({"RECIPIENT_NAME": "Alex", "VIBE": "neon"}),
                ],
            ),
        )

        first = client.post("/api/sessions/tab-3/messages", json={"message": "Alex"})
        assert first.json()["mode"] == "chatting"
        built = client.post(
            "/api/sessions/tab-3/messages",
            json={"message": "loves neon and motorcycles"},
        )

        assert built.status_code == 200
        code = built.json()["code"]
        assert "fetch('/api/webhook-proxy')" in code
        assert "n8n.cloud" not in code
        assert built.json()["json_schema"]["RECIPIENT_NAME"] == "Alex"
        translate_prompt = llm.calls[4]["prompt"]
        assert "User: Alex" in translate_prompt
        assert "User: loves neon and motorcycles" in translate_prompt

    def test_unexpected_failure_leaves_session_usable(
        self, test_app: FastAPI, client: TestClient
    ) -> None:
        use_fake_llm(
            test_app,
            FakeLLM(
                replies=["All set!", "Anything else?"],
                json_replies=[COMPLETE, httpx.ReadTimeout("read timed out"), INCOMPLETE],
            ),
        )

        failed = client.post("/api/sessions/tab-4/messages", json={"message": "I'm Tom"})
        assert failed.status_code == 500
        assert client.get("/api/sessions/tab-4").json()["mode"] == "chatting"

        retried = client.post("/api/sessions/tab-4/messages", json={"message": "Still me"})
        assert retried.status_code == 200
        assert retried.json()["mode"] == "chatting"
