# homework/errors.py

import aiosqlite
from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from homework.log import get_logger


async def database_error_handler(request: Request, exc: aiosqlite.Error) -> PlainTextResponse:
    """DBのエラーはすべて 500 とし、エラー内容をそのまま返す"""
    get_logger().error("%s %s failed: %r", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )
