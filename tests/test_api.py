import pytest
from fastapi.testclient import TestClient

from vspace.application.api.main import create_app
from vspace.application.settings import Settings


@pytest.fixture
def client():
    app = create_app(Settings(_env_file=None, debug=False, max_document_chars=100))
    with TestClient(app) as c:
        yield c


def add(client, text):
    return client.post("/documents", content=text.encode("utf-8"),
                       headers={"Content-Type": "text/plain"})


def test_root_reports_document_count(client):
    assert client.get("/").json()["documents"] == 0
    add(client, "hello world")
    body = client.get("/").json()
    assert body["ok"] is True
    assert body["documents"] == 1


def test_add_has_no_payload(client):
    resp = add(client, "hello world")
    assert resp.status_code == 204
    assert resp.content == b""


def test_search_post(client):
    add(client, "cat dog")
    add(client, "cat cat")
    resp = client.post("/search", content=b"cat")
    assert resp.status_code == 200
    body = resp.json()
    assert body["results"] == ["cat cat", "cat dog"]
    assert isinstance(body["elapsed"], float)


def test_search_get(client):
    add(client, "hello world")
    body = client.get("/search", params={"q": "world"}).json()
    assert body["results"] == ["hello world"]


def test_empty_results(client):
    add(client, "alpha beta")
    assert client.post("/search", content=b"gamma").json()["results"] == []
    assert client.post("/search", content=b"").json()["results"] == []


def test_empty_query_with_blank_document(client):
    assert add(client, "").status_code == 204
    add(client, "alpha beta")
    assert client.get("/").json()["documents"] == 2
    assert client.post("/search", content=b"").json()["results"] == []
    assert client.get("/search").json()["results"] == []


def test_invalid_utf8_is_replaced(client):
    assert add(client, "ok").status_code == 204
    resp = client.post("/documents", content=b"bad \xff byte")
    assert resp.status_code == 204
    body = client.post("/search", content=b"bad").json()
    assert body["results"] == ["bad \ufffd byte"]


def test_oversized_document_rejected(client):
    resp = add(client, "x" * 101)
    assert resp.status_code == 413
    assert client.get("/").json()["documents"] == 0


def test_unsupported_method_and_route(client):
    assert client.put("/documents", content=b"x").status_code == 405
    assert client.delete("/search").status_code == 405
    assert client.get("/nope").status_code == 404


def test_apps_do_not_share_an_index():
    a = create_app(Settings(_env_file=None))
    b = create_app(Settings(_env_file=None))
    with TestClient(a) as ca, TestClient(b) as cb:
        add(ca, "only in a")
        assert cb.get("/").json()["documents"] == 0
