from contextlib import asynccontextmanager
from typing import AsyncGenerator

from core.config import get_setting
from core.db.database import close_db, init_db
from core.exception.handlers import register_exception_handlers
from core.log.logging import get_logging
from core.middleware.transaction import register_transaction_middleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from web.router import router

settings = get_setting()

logger = get_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        logger.info("Initializing database")
        await init_db()
        yield
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise e
    finally:
        await close_db()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Cupid Builder",
        description="Toy Boy experience builder: chat, translate, generate, share",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_transaction_middleware(app)
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(router)
    logger.info(f"{settings.APP_NAME} initialized (provider: {settings.MODEL_PROVIDER})")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        access_log=False,
    )
