# homework/log.py

import logging
import time

from fastapi import Request

LOGGER_NAME = "homework"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel(level.upper())


def get_logger() -> logging.Logger:
    """ルートハンドラーに注入するロガー"""
    return logging.getLogger(LOGGER_NAME)


async def log_requests(request: Request, call_next):
    """すべてのリクエストを 'METHOD path status time' の形式で記録する"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    get_logger().info(
        "%s %s %d %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
