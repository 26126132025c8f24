# forum/main.py

from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings, settings as default_settings
from forum.db.session import Database
from forum.errors import register_exception_handlers
from forum.logging_config import configure_logging
from forum.routers import question as question_router
from forum.routers import users as users_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    # ------------------------
    # 커넥션 풀: 시작 시 생성, 종료 시 정리
    # ------------------------
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(settings)
        if settings.create_tables:
            db.create_all()
        app.state.db = db
        logger.info("forum api started (env=%s)", settings.app_env)
        try:
            yield
        finally:
            db.dispose()

    app = FastAPI(title="Forum API", lifespan=lifespan)
    app.state.settings = settings

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=False,  # 토큰은 Authorization 헤더로만 받음
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(users_router.router)
    app.include_router(question_router.router)

    @app.get("/", tags=["health"])
    def root():
        return {"ok": True}

    return app


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run("forum.main:create_app", factory=True, host="0.0.0.0", port=port)
