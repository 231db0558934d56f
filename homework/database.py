# homework/database.py

from pathlib import Path
from typing import AsyncIterator, Iterable, List

import aiosqlite
from fastapi import Request

from homework import config


def load_sql(name: str) -> str:
    """sql/ ディレクトリから名前でSQL文を読み込む"""
    return (config.SQL_DIR / f"{name}.sql").read_text(encoding="utf-8")


async def connect(database_path: str) -> aiosqlite.Connection:
    connection = await aiosqlite.connect(database_path)
    connection.row_factory = aiosqlite.Row
    try:
        # subjectId の参照整合性はDB側で保証する
        await connection.execute("PRAGMA foreign_keys = ON")
    except aiosqlite.Error:
        await connection.close()
        raise
    return connection


async def get_connection(request: Request) -> AsyncIterator[aiosqlite.Connection]:
    """
    リクエストごとに接続を開き、レスポンスを返した後に閉じる。
    接続に失敗した場合は aiosqlite.Error がそのまま送出される。
    """
    connection = await connect(request.app.state.database_path)
    try:
        yield connection
    finally:
        await connection.close()


async def fetch_all(
    connection: aiosqlite.Connection, sql: str, parameters: Iterable = ()
) -> List[aiosqlite.Row]:
    async with connection.execute(sql, tuple(parameters)) as cursor:
        return list(await cursor.fetchall())


async def execute(
    connection: aiosqlite.Connection, sql: str, parameters: Iterable = ()
) -> aiosqlite.Cursor:
    """
    書き込み系のSQLを1文だけ実行してコミットする。
    戻り値のカーソルから lastrowid / rowcount を参照できる。
    """
    cursor = await connection.execute(sql, tuple(parameters))
    await connection.commit()
    return cursor


async def init_database(database_path: str) -> None:
    """テーブルを作成し、科目の初期データを投入する"""
    Path(database_path).parent.mkdir(parents=True, exist_ok=True)
    connection = await connect(database_path)
    try:
        await connection.executescript(load_sql("schema"))
        await connection.commit()
    finally:
        await connection.close()
