from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"

# Settings 에 없는 값(POD_NAME 등)도 os.getenv 로 읽을 수 있도록 프로세스 환경에 로드
load_dotenv(ENV_FILE)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 앱 관련 설정
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # 공유 링크 생성에 사용하는 외부 노출 주소
    PUBLIC_BASE_URL: str = "http://localhost:3000"

    # 데이터베이스 관련 설정
    DATABASE_URL: str = "sqlite+aiosqlite:///cupid.db"

    # 로깅 관련 설정
    DATA_PATH: str = "./data"
    LOG_PATH: str = "/logs"
    SESSION_PATH: str = "/sessions"
    ENVIRONMENT: str = "LOCAL"
    LOG_LEVEL: str = "DEBUG"
    APP_NAME: str = "cupid-builder"
    OTEL_EXPORTER_ENDPOINT: str = "grafana-alloy.grafana-alloy.svc.cluster.local:4317"

    # 웹훅 프록시 설정
    WEBHOOK_URL: str = (
        "https://connorjoejoseph.app.n8n.cloud/webhook-test/"
        "6c934abf-e08b-4ace-aa32-012b814e1d58"
    )
    WEBHOOK_TIMEOUT: float = 30.0

    # LLM 관련 설정 (GOOGLE | OPEN_AI | AZURE | ANTHROPIC)
    MODEL_PROVIDER: str = "GOOGLE"
    LLM_TIMEOUT: float = 120.0

    GOOGLE_GENAI_API_KEY: str = ""
    GOOGLE_CHAT_MODEL: str = "gemini-3-flash"
    GOOGLE_CHECK_MODEL: str = "gemini-3-flash"
    GOOGLE_TRANSLATE_MODEL: str = "gemini-2.5-flash-lite"
    GOOGLE_GENERATE_MODEL: str = "gemini-2.5-flash-lite"

    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = ""
    OPENAI_CHAT_MODEL: str = "gpt-5-nano"
    OPENAI_CHECK_MODEL: str = "gpt-4o-mini"
    OPENAI_TRANSLATE_MODEL: str = "gpt-5-nano"
    OPENAI_GENERATE_MODEL: str = "gpt-5-nano"

    # Azure OpenAI (AOAI) 설정 - 모델명 대신 deployment 이름을 사용
    AOAI_ENDPOINT: str = ""
    AOAI_API_KEY: str = ""
    AOAI_API_VERSION: str = "2024-02-01"
    AOAI_DEPLOY_GPT4O: str = ""
    AOAI_DEPLOY_GPT4O_MINI: str = ""

    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_CHAT_MODEL: str = "claude-sonnet-4-20250514"
    ANTHROPIC_CHECK_MODEL: str = "claude-3-5-haiku-latest"
    ANTHROPIC_TRANSLATE_MODEL: str = "claude-sonnet-4-20250514"
    ANTHROPIC_GENERATE_MODEL: str = "claude-sonnet-4-20250514"
    ANTHROPIC_MAX_TOKENS: int = 8000


settings = Settings()


def get_setting() -> Settings:
    return settings
