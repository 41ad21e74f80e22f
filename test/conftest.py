import base64
import io
import uuid

import pytest
from PIL import Image

from files_manager.app import create_app
from files_manager.common.db import db
from files_manager.services.queue import MemoryJobQueue


@pytest.fixture
def job_queue():
    return MemoryJobQueue(max_retries=1)


@pytest.fixture
def test_app(tmp_path, job_queue):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "FOLDER_PATH": str(tmp_path / "files_manager"),
        "STORAGE_BACKEND": "local",
        "TOKEN_STORE_BACKEND": "memory",
        "QUEUE_BACKEND": "memory",
        "THUMBNAIL_CONCURRENCY": 1,
        "EMAIL_CONCURRENCY": 1,
    }, job_queue=job_queue)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(test_app):
    return test_app.test_client()


@pytest.fixture
def services(test_app):
    return test_app.extensions["files_manager"]


@pytest.fixture
def basic_auth():
    def _headers(email, password):
        raw = f"{email}:{password}".encode("utf-8")
        return {"Authorization": "Basic " + base64.b64encode(raw).decode("ascii")}
    return _headers


@pytest.fixture
def login(client, basic_auth):
    """注册并登录一个随机用户，返回 X-Token headers"""
    def _login(email=None, password="pw123"):
        email = email or f"user_{uuid.uuid4().hex[:6]}@test.com"
        res = client.post("/users", json={"email": email, "password": password})
        assert res.status_code == 201, res.get_json()
        res = client.get("/connect", headers=basic_auth(email, password))
        assert res.status_code == 200, res.get_json()
        return {"X-Token": res.get_json()["token"]}
    return _login


@pytest.fixture
def auth_headers(login):
    return login()


@pytest.fixture
def png_bytes():
    def _png(width=800, height=600, color=(200, 30, 30)):
        img = Image.new("RGB", (width, height), color)
        # 沿对角线打点，避免纯色图片
        for x in range(0, width, 10):
            img.putpixel((x, (x * height // width) % height), (0, 0, 255))
        out = io.BytesIO()
        img.save(out, format="PNG")
        return out.getvalue()
    return _png


@pytest.fixture
def b64():
    def _encode(data):
        if isinstance(data, str):
            data = data.encode("utf-8")
        return base64.b64encode(data).decode("ascii")
    return _encode
