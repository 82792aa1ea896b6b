"""FastAPI application for the Kickabout simulator."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kickabout.api.routers import sessions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Kickabout API starting up")
    yield
    logger.info("Kickabout API shutting down")
    from kickabout.api.routers.sessions import active_session_ids, remove_session

    for session_id in active_session_ids():
        remove_session(session_id)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Kickabout API",
        description="Real-time 2D football simulation",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(sessions_router, prefix="/api/v1")

    return app


app = create_app()


@app.get("/")
async def root() -> dict:
    """Root endpoint - API info."""
    return {
        "name": "Kickabout API",
        "version": "0.1.0",
        "description": "Real-time 2D football simulation",
        "docs": "/docs",
    }


def run_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=host, port=port)
