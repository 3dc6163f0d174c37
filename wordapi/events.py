from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Tuple

import socketio
from pydantic import ValidationError

from .errors import QueryError, ServiceUnavailable
from .logging_config import get_logger
from .query import QueryEngine
from .schemas import ErrorResponse, WordQuery, WordsResponse

logger = get_logger(__name__)


def handle_word_query(engine: Optional[QueryEngine], payload: Any) -> Tuple[str, Dict[str, Any]]:
    """Run a `words:query` payload; returns the event name and body to send back."""
    if not isinstance(payload, dict):
        return 'words:error', ErrorResponse(error='Invalid payload').model_dump()
    try:
        q = WordQuery.model_validate(payload)
    except ValidationError:
        return 'words:error', ErrorResponse(error='Invalid payload').model_dump()
    try:
        if engine is None:
            raise ServiceUnavailable()
        words = engine.query(q.language, q.chars, q.length, q.limit)
    except QueryError as e:
        return 'words:error', ErrorResponse(error=e.message).model_dump()
    return 'words:result', WordsResponse(words=words).model_dump()


def register_events(sio: socketio.AsyncServer, get_engine: Callable[[], Optional[QueryEngine]]) -> None:
    @sio.event
    async def connect(sid, environ, auth=None):
        await sio.emit('pong', to=sid)

    @sio.event
    async def disconnect(sid, *args):
        logger.debug('client %s disconnected', sid)

    @sio.on('ping')
    async def on_ping(sid, *args):
        await sio.emit('pong', to=sid)

    @sio.on('words:query')
    async def words_query(sid, payload=None):
        event, body = handle_word_query(get_engine(), payload)
        # Reply to the sender only
        await sio.emit(event, body, to=sid)
