from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from ..dictionary import SUPPORTED_LANGUAGES
from ..errors import QueryError, ServiceUnavailable
from ..logging_config import get_logger
from ..query import QueryEngine
from ..schemas import ErrorResponse, LanguagesResponse, WordsResponse

logger = get_logger(__name__)

router = APIRouter()


def get_query_engine(request: Request) -> QueryEngine:
    engine = request.app.state.engine
    if engine is None:
        raise ServiceUnavailable()
    return engine


async def query_error_handler(request: Request, exc: QueryError):
    if exc.status_code >= 500:
        logger.error('%s %s: %s', request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


# /api/words/english?chars=a,b,c&length=5&limit=10
@router.get(
    '/api/words/{language}',
    response_model=WordsResponse,
    responses={400: {'model': ErrorResponse}, 500: {'model': ErrorResponse}},
)
async def get_words(
    language: str,
    chars: Optional[str] = None,
    length: Optional[str] = None,
    limit: Optional[str] = None,
    engine: QueryEngine = Depends(get_query_engine),
):
    words = engine.query(language, chars, length, limit)
    return WordsResponse(words=words)


@router.get('/api/languages', response_model=LanguagesResponse)
async def list_languages(engine: QueryEngine = Depends(get_query_engine)):
    return LanguagesResponse(supported=list(SUPPORTED_LANGUAGES), loaded=engine.store.counts())


@router.get('/health', response_class=PlainTextResponse)
async def health():
    return 'OK'
