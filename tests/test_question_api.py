from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from forum.db.session import Database
from forum.deps import get_db
from forum.main import create_app


def test_health(client):
    assert client.get("/").json() == {"ok": True}


def test_question_routes_require_token(client):
    assert client.get("/question").status_code == 401
    assert client.get("/question/abc").status_code == 401
    resp = client.post("/question", json={"title": "t", "description": "d"})
    assert resp.status_code == 401
    assert resp.json() == {"msg": "Authentication invalid"}


def test_bad_token_rejected(client):
    resp = client.get("/question", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_create_and_fetch_question(client, alice, auth_headers):
    headers = auth_headers(alice)

    resp = client.post(
        "/question",
        json={"title": "What is REST?", "description": "Explain it."},
        headers=headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["msg"] == "Question added"
    questionid = body["questionid"]

    resp = client.get(f"/question/{questionid}", headers=headers)
    assert resp.status_code == 200
    question = resp.json()["question"]
    assert question["title"] == "What is REST?"
    assert question["description"] == "Explain it."
    assert question["userid"] == alice.userid
    assert question["username"] == "alice"


def test_create_validation_errors(client, alice, auth_headers):
    headers = auth_headers(alice)

    resp = client.post("/question", json={"title": "", "description": "d"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Please provide all required information"}

    resp = client.post(
        "/question", json={"title": "x" * 201, "description": "d"}, headers=headers
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Title must be less than 200 characters"}

    resp = client.post("/question", headers=headers)
    assert resp.status_code == 400

    assert client.get("/question", headers=headers).json() == {"questions": []}


def test_author_comes_from_token_not_body(client, alice, bob, auth_headers):
    resp = client.post(
        "/question",
        json={"title": "t", "description": "d", "userid": alice.userid},
        headers=auth_headers(bob),
    )
    questionid = resp.json()["questionid"]

    question = client.get(f"/question/{questionid}", headers=auth_headers(bob)).json()["question"]
    assert question["userid"] == bob.userid


def test_list_empty_store(client, alice, auth_headers):
    resp = client.get("/question", headers=auth_headers(alice))
    assert resp.status_code == 200
    assert resp.json() == {"questions": []}


def test_list_newest_first(client, alice, bob, auth_headers):
    first = client.post(
        "/question", json={"title": "first", "description": "1"}, headers=auth_headers(alice)
    ).json()["questionid"]
    second = client.post(
        "/question", json={"title": "second", "description": "2"}, headers=auth_headers(bob)
    ).json()["questionid"]

    questions = client.get("/question", headers=auth_headers(alice)).json()["questions"]

    assert questions == [
        {"question_id": second, "title": "second", "content": "2", "user_name": "bob"},
        {"question_id": first, "title": "first", "content": "1", "user_name": "alice"},
    ]


def test_get_unknown_question(client, alice, auth_headers):
    resp = client.get("/question/no-such-id", headers=auth_headers(alice))
    assert resp.status_code == 404
    assert resp.json() == {"msg": "No question found with this ID."}


def test_duplicate_generated_id_is_conflict(client, alice, auth_headers, monkeypatch):
    from forum.services import question_service

    monkeypatch.setattr(question_service, "_new_question_id", lambda: "same-id")
    headers = auth_headers(alice)

    assert client.post("/question", json={"title": "a", "description": "b"}, headers=headers).status_code == 201
    resp = client.post("/question", json={"title": "c", "description": "d"}, headers=headers)
    assert resp.status_code == 409
    assert resp.json() == {"msg": "Question ID already exists"}


class _FailingSession:
    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("db down"))

    def add(self, obj):
        pass

    def commit(self):
        pass

    def rollback(self):
        pass


def test_storage_faults_map_to_status_codes(client, alice, auth_headers):
    def broken_db():
        yield _FailingSession()

    client.app.dependency_overrides[get_db] = broken_db
    headers = auth_headers(alice)
    try:
        resp = client.post("/question", json={"title": "t", "description": "d"}, headers=headers)
        assert resp.status_code == 500
        assert resp.json() == {"msg": "Something went wrong, try again later"}

        resp = client.get("/question", headers=headers)
        assert resp.status_code == 404
        assert resp.json() == {"msg": "No questions found"}

        resp = client.get("/question/abc", headers=headers)
        assert resp.status_code == 500
    finally:
        client.app.dependency_overrides.clear()


def test_bad_query_params_get_generic_message(client, alice, auth_headers):
    resp = client.get("/question?limit=0", headers=auth_headers(alice))
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid request"}


def test_missing_body_asks_for_required_fields(client, alice, auth_headers):
    resp = client.post("/question", headers=auth_headers(alice))
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Please provide all required information"}


def test_shutdown_disposes_connection_pool(settings, monkeypatch):
    disposed = []
    original = Database.dispose

    def spy(self):
        disposed.append(self)
        original(self)

    monkeypatch.setattr(Database, "dispose", spy)

    app = create_app(settings)
    with TestClient(app) as c:
        assert c.get("/").status_code == 200
        assert disposed == []

    assert disposed == [app.state.db]
