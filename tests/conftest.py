import asyncio
import sqlite3

import pytest
from fastapi.testclient import TestClient

from homework.database import init_database
from homework.main import create_app

SEED_ASSIGNMENTS = (
    (1, "Problem set 1", 1, 1, "2024-01-08", "Exercises 1-20"),
    (2, "Book report", 2, 2, "2024-01-12", None),
    (3, "Lab write-up", 1, 3, "2024-01-15", "Titration lab"),
    (4, "Timeline poster", 3, 4, "2024-01-22", None),
    (5, "Sorting algorithms", 2, 5, "2024-02-02", "Implement merge sort"),
    (6, "Problem set 2", 1, 1, "2024-02-05", None),
)


@pytest.fixture
def database_path(tmp_path) -> str:
    """Create a fresh database with the schema, seed subjects and seed assignments."""
    path = str(tmp_path / "homework.db")
    asyncio.run(init_database(path))
    connection = sqlite3.connect(path)
    with connection:
        connection.executemany(
            "INSERT INTO assignments"
            " (assignmentId, title, priority, subjectId, dueDate, description)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            SEED_ASSIGNMENTS,
        )
    connection.close()
    return path


@pytest.fixture
def client(database_path) -> TestClient:
    with TestClient(create_app(database_path=database_path)) as test_client:
        yield test_client


def fetch_rows(database_path: str, sql: str, parameters: tuple = ()) -> list:
    connection = sqlite3.connect(database_path)
    try:
        return connection.execute(sql, parameters).fetchall()
    finally:
        connection.close()
