# homework/main.py

import argparse
import asyncio
from typing import Optional

import aiosqlite
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from homework import config
from homework.database import init_database
from homework.errors import database_error_handler, http_error_handler
from homework.log import configure_logging, get_logger, log_requests
from homework.routers import assignment, webapp


def create_app(database_path: Optional[str] = None) -> FastAPI:
    app = FastAPI(title="Homework Tracker")
    app.state.database_path = database_path or config.DATABASE_PATH

    app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")
    app.include_router(webapp.router)
    app.include_router(assignment.router)

    app.add_exception_handler(aiosqlite.Error, database_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.middleware("http")(log_requests)
    return app


configure_logging(config.LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Homework assignment tracker")
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="create the tables and seed subjects before starting",
    )
    args = parser.parse_args()

    if args.init_db:
        asyncio.run(init_database(config.DATABASE_PATH))
        get_logger().info("initialized database at %s", config.DATABASE_PATH)

    get_logger().info(
        "App server listening on %s. (Go to http://%s:%s)", config.PORT, config.HOST, config.PORT
    )
    uvicorn.run(app, host=config.HOST, port=config.PORT)
