# homework/config.py

import os
from pathlib import Path

from dotenv import load_dotenv

# .env があれば環境変数として読み込む (既存の環境変数は上書きしない)
load_dotenv()

# --- パッケージ内のリソース ---
BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"
SQL_DIR = BASE_DIR / "sql"

# --- データベース ---
DATABASE_PATH = os.getenv("HOMEWORK_DATABASE_PATH", "data/homework.db")

# --- ログ ---
LOG_LEVEL = os.getenv("HOMEWORK_LOG_LEVEL", "INFO")

# --- サーバー ---
HOST = os.getenv("HOMEWORK_HOST", "127.0.0.1")
PORT = int(os.getenv("HOMEWORK_PORT", "3000"))
