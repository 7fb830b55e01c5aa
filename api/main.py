"""FastAPI application for the golf round scoring API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from courses import JsonCourseRepository, bundled_courses

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the course catalog on startup."""
    if config.COURSE_DATA_DIR:
        app.state.courses = JsonCourseRepository(Path(config.COURSE_DATA_DIR))
    else:
        app.state.courses = bundled_courses()
    logger.info("Course catalog ready: %d course(s)", len(app.state.courses.list_courses()))
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Golf Round Scoring API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import courses, games, rounds
    app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(games.router, prefix="/api/games", tags=["games"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "courses": len(app.state.courses.list_courses())}

    return app


app = create_app()
