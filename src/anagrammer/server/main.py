"""
Anagrammer API Server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from anagrammer import __version__
from anagrammer.config import Settings
from anagrammer.logging_utils import get_logger
from anagrammer.server.routes import anagrams, dictionaries, signatures, state

logger = get_logger()


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    logger.info("Anagrammer API routes:")
    for methods, path, name in routes:
        logger.info("  %-8s %-32s → %s", methods, path, name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_routes(app)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Anagrammer API", lifespan=lifespan)

    origins = settings.cors_origin_list
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(dictionaries.router)
    app.include_router(anagrams.router)
    app.include_router(signatures.router)
    app.include_router(state.router)

    @app.get("/")
    async def root():
        return {"name": "Anagrammer API", "version": __version__}

    return app


app = create_app()
