"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from closest_pair import __version__
from closest_pair.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.closest_pair_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="closest-pair",
        description="Closest pair of points: brute force, divide and conquer, packed-key heuristic",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Importing the engine registers every algorithm
    import closest_pair.engine  # noqa: F401

    from closest_pair.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
