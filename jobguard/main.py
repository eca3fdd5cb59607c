import asyncio
from typing import Optional

from fastapi import FastAPI

from .config import Settings, settings as default_settings
from .routers.guidance import router as guidance_router
from .routers.history import router as history_router
from .routers.scan import router as scan_router
from .services.gemini_client import GeminiClient
from .services.retry import Sleep
from .services.scan_service import Analyzer
from .services.session import ScanSession


def create_app(
    cfg: Optional[Settings] = None,
    analyzer: Optional[Analyzer] = None,
    sleep: Optional[Sleep] = None,
) -> FastAPI:
    cfg = cfg or default_settings

    app = FastAPI(title="JobGuard API")
    app.state.settings = cfg
    app.state.session = ScanSession.from_settings(cfg)
    app.state.analyzer = analyzer or GeminiClient(cfg)
    app.state.sleep = sleep or asyncio.sleep

    app.include_router(scan_router)
    app.include_router(history_router)
    app.include_router(guidance_router)

    @app.get("/")
    def root():
        return {"message": "API is running!"}

    return app


app = create_app()
