"""Every data route answers 500 when the database cannot be used."""

import pytest
from fastapi.testclient import TestClient

from homework.main import create_app

FORM = {"title": "Essay", "priority": "2", "subject": "1", "dueDate": "2024-01-01"}

REQUESTS = (
    ("GET", "/assignments", None),
    ("GET", "/assignments/1", None),
    ("GET", "/assignments/1/delete", None),
    ("POST", "/assignments", FORM),
    ("POST", "/assignments/1", FORM),
)


@pytest.fixture(params=("unreachable", "malformed"))
def broken_client(request, tmp_path) -> TestClient:
    if request.param == "unreachable":
        database_path = tmp_path / "missing-directory" / "homework.db"
    else:
        database_path = tmp_path / "homework.db"
        database_path.write_bytes(b"this is not a sqlite database file" * 64)
    with TestClient(create_app(database_path=str(database_path))) as test_client:
        yield test_client


@pytest.mark.parametrize(("method", "path", "data"), REQUESTS)
def test_data_routes_return_500(broken_client, method, path, data) -> None:
    response = broken_client.request(method, path, data=data, follow_redirects=False)
    assert response.status_code == 500
    assert response.text


def test_home_page_does_not_touch_database(broken_client) -> None:
    assert broken_client.get("/").status_code == 200
