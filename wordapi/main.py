from __future__ import annotations
import random
from contextlib import asynccontextmanager
from typing import Optional

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .dictionary import DictionaryStore
from .errors import QueryError
from .events import register_events
from .logging_config import get_logger, setup_logging
from .query import QueryEngine
from .routers.words import query_error_handler, router as words_router

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DictionaryStore] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Word lists are loaded once, before the first request is served
        if app.state.engine is None:
            loaded = DictionaryStore.from_directory(settings.dictionaries_dir)
            app.state.engine = QueryEngine(loaded, rng=rng, default_limit=settings.default_limit)
        logger.info('Word API service running on port %d', settings.port)
        yield

    app = FastAPI(title="Word API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = (
        QueryEngine(store, rng=rng, default_limit=settings.default_limit)
        if store is not None else None
    )

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    app.include_router(words_router)
    app.add_exception_handler(QueryError, query_error_handler)

    # Socket.IO server (ASGI), sharing the same query engine
    origins = '*' if '*' in settings.cors_origins else settings.cors_origins
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=origins)
    register_events(sio, lambda: app.state.engine)
    app.state.sio = sio
    return app


def create_asgi_app(app: FastAPI) -> socketio.ASGIApp:
    return socketio.ASGIApp(app.state.sio, other_asgi_app=app)


app = create_app()

# Export ASGI app for uvicorn: uvicorn wordapi.main:application --port 3000
application = create_asgi_app(app)
