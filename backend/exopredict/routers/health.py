from fastapi import APIRouter

from ..config import settings

router = APIRouter()

@router.get("/health")
async def health():
    return {
        "status": "ok",
        "upstream": settings.upstream_url,
        "api_key_configured": bool(settings.api_key.get_secret_value()),
    }
