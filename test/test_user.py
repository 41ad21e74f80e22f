import uuid

from files_manager.services.queue import WELCOME_EMAIL_JOB
from files_manager.worker import run


def _email():
    return f"user_{uuid.uuid4().hex[:6]}@test.com"


def test_register(client):
    email = _email()
    res = client.post("/users", json={"email": email, "password": "pw123"})
    assert res.status_code == 201
    data = res.get_json()
    assert data["email"] == email
    assert isinstance(data["id"], int)


def test_register_missing_fields(client):
    res = client.post("/users", json={"password": "pw123"})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Missing email"}

    res = client.post("/users", json={"email": _email()})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Missing password"}


def test_register_duplicate_email(client):
    email = _email()
    client.post("/users", json={"email": email, "password": "pw123"})
    res = client.post("/users", json={"email": email, "password": "other"})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Already exist"}


def test_password_is_hashed(client, test_app, services):
    email = _email()
    client.post("/users", json={"email": email, "password": "pw123"})
    with test_app.app_context():
        user = services.documents.find_one("users", {"email": email})
    assert user["password"] != "pw123"


def test_register_queues_welcome_email(client, test_app, job_queue, caplog):
    email = _email()
    client.post("/users", json={"email": email, "password": "pw123"})
    assert job_queue.pending(WELCOME_EMAIL_JOB) == 1

    with caplog.at_level("INFO"):
        assert run(test_app, WELCOME_EMAIL_JOB) == 1
    assert f"Welcome {email}" in caplog.text
    assert job_queue.failed == []


def test_welcome_email_for_unknown_user_fails(test_app, job_queue):
    job_queue.enqueue(WELCOME_EMAIL_JOB, {"userId": 4242})
    assert run(test_app, WELCOME_EMAIL_JOB) == 0
    job, error = job_queue.failed[0]
    assert str(error) == "User not found"
    assert job.attempts == 2


def test_connect(client, basic_auth):
    email = _email()
    client.post("/users", json={"email": email, "password": "pw123"})
    res = client.get("/connect", headers=basic_auth(email, "pw123"))
    assert res.status_code == 200
    assert res.get_json()["token"]


def test_connect_rejects_bad_credentials(client, basic_auth):
    email = _email()
    client.post("/users", json={"email": email, "password": "pw123"})

    wrong_password = client.get("/connect", headers=basic_auth(email, "nope"))
    unknown_email = client.get("/connect", headers=basic_auth(_email(), "pw123"))
    no_header = client.get("/connect")

    for res in (wrong_password, unknown_email, no_header):
        assert res.status_code == 401
        assert res.get_json() == {"error": "Unauthorized"}


def test_me(client, login):
    email = _email()
    headers = login(email=email)
    res = client.get("/users/me", headers=headers)
    assert res.status_code == 200
    data = res.get_json()
    assert data["email"] == email
    assert "password" not in data


def test_me_requires_token(client):
    assert client.get("/users/me").status_code == 401
    res = client.get("/users/me", headers={"X-Token": "not-a-token"})
    assert res.status_code == 401
    assert res.get_json() == {"error": "Unauthorized"}


def test_disconnect(client, auth_headers):
    res = client.get("/disconnect", headers=auth_headers)
    assert res.status_code == 204
    assert res.data == b""

    assert client.get("/users/me", headers=auth_headers).status_code == 401
    assert client.get("/disconnect", headers=auth_headers).status_code == 401


def test_several_tokens_per_user(client, basic_auth):
    email = _email()
    client.post("/users", json={"email": email, "password": "pw123"})
    first = client.get("/connect", headers=basic_auth(email, "pw123")).get_json()["token"]
    second = client.get("/connect", headers=basic_auth(email, "pw123")).get_json()["token"]
    assert first != second

    client.get("/disconnect", headers={"X-Token": first})
    assert client.get("/users/me", headers={"X-Token": first}).status_code == 401
    assert client.get("/users/me", headers={"X-Token": second}).status_code == 200
