# File: beaver_core/main.py

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beaver_core.api.routes_health import router as health_router
from beaver_core.core.config import Settings, get_settings
from beaver_core.db.session import create_session_factory


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.session_factory = create_session_factory(settings.database_url)

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.backend_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ROUTERS ----------
    app.include_router(health_router)

    return app
