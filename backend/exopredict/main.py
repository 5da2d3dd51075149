import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .logs import configure_logging
from .routers import analyze, health, predict, ui
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.api_key.get_secret_value():
        logger.warning("EP_API_KEY is not set; upstream calls will carry an empty API key")
    app.state.upstream = UpstreamClient(settings)
    logger.info(f"forwarding to {settings.upstream_url}")
    try:
        yield
    finally:
        await app.state.upstream.aclose()

def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="ExoPredict Gateway", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(predict.router)
    app.include_router(analyze.router)
    app.include_router(ui.router)
    return app

app = create_app()
