from datetime import datetime

from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health():
    return {
        "message": "Cupid builder is running",
        "timestamp": datetime.now().isoformat(),
    }
