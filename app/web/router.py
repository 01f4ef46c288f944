from cupid.chat.controller.chat_controller import router as chat_router
from cupid.experience.controller.experience_controller import (
    router as experience_router,
)
from cupid.generate_code.controller.generate_code_controller import (
    router as generate_code_router,
)
from cupid.health.controller.health_controller import router as health_router
from cupid.preview.controller.preview_controller import router as preview_router
from cupid.session.controller.session_controller import router as session_router
from cupid.translate.controller.translate_controller import (
    router as translate_router,
)
from cupid.webhook_proxy.controller.webhook_proxy_controller import (
    router as webhook_proxy_router,
)
from fastapi import APIRouter

router = APIRouter()
router.include_router(health_router)
router.include_router(chat_router)
router.include_router(translate_router)
router.include_router(generate_code_router)
router.include_router(preview_router)
router.include_router(experience_router)
router.include_router(session_router)
router.include_router(webhook_proxy_router)
