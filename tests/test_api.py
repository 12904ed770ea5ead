"""HTTP-level tests through FastAPI's TestClient."""
from __future__ import annotations

import base64

PNG = base64.b64encode(b"\x89PNG\r\n").decode("ascii")


def _create(client, post_id=1, **overrides):
    body = {"id": post_id, "title": "T", "content": "C", "date": "2024-01-01", "tags": ["intro"]}
    body.update(overrides)
    return client.post("/blogposts", json=body)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["x-content-type-options"] == "nosniff"


def test_create_get_list(client):
    resp = _create(client, author="alice")
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == 1
    assert body["tags"] == ["intro"]
    assert body["image_ids"] == []

    assert client.get("/blogposts/1").json()["author"] == "alice"
    assert [p["id"] for p in client.get("/blogposts/list").json()] == [1]
    assert client.get("/blogposts/list", params={"tag": "other"}).json() == []


def test_create_validation_and_conflict(client):
    resp = _create(client, title="")
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_input"

    assert _create(client).status_code == 200
    resp = _create(client, title="Again")
    assert resp.status_code == 409
    assert resp.json() == {"ok": False, "error": "invalid_state", "message": "BlogPost already exists"}


def test_update(client):
    _create(client)
    resp = client.put(
        "/blogposts",
        json={"id": 1, "title": "New", "content": "C2", "date": "2024-02-02", "tags": []},
    )
    assert resp.status_code == 200
    assert resp.json()["title"] == "New"
    assert client.get("/blogposts/1").json()["tags"] == []

    missing = client.put("/blogposts", json={"id": 2, "title": "x", "content": "y", "date": "d"})
    assert missing.status_code == 404


def test_id_checks(client):
    assert client.get("/blogposts/0").status_code == 400
    assert client.delete("/blogposts/-3").status_code == 400
    assert client.get("/blogposts/5").status_code == 404


def test_delete_returns_post(client):
    _create(client, preview_image=PNG)
    resp = client.delete("/blogposts/1")
    assert resp.status_code == 200
    assert resp.json()["preview_image"] == PNG
    assert client.get("/blogposts/1").status_code == 404


def test_image_lifecycle(client):
    _create(client)
    assert client.get("/blogposts/1/images").json() == []

    resp = client.post(
        "/blogposts/1/images",
        json={"id": 10, "data": PNG, "mime_type": "image/png", "description": "d"},
    )
    assert resp.status_code == 200
    assert resp.json()["image_ids"] == [10]

    images = client.get("/blogposts/1/images").json()
    assert images == [{"id": 10, "mime_type": "image/png", "description": "d", "post_id": 1, "data": PNG}]

    uri = client.get("/image/10")
    assert uri.status_code == 200
    assert uri.text == f"data:image/png;base64,{PNG}"

    resp = client.delete("/blogposts/1/images/10")
    assert resp.status_code == 200
    assert resp.json()["image_ids"] == []
    assert client.get("/image/10").status_code == 404


def test_image_payload_errors(client):
    _create(client)
    no_description = client.post("/blogposts/1/images", json={"id": 10, "data": PNG, "mime_type": "image/png"})
    assert no_description.status_code == 400

    bad_base64 = client.post(
        "/blogposts/1/images",
        json={"id": 11, "data": "not base64!", "mime_type": "image/png", "description": "d"},
    )
    assert bad_base64.status_code == 400
    assert client.get("/image/10").status_code == 404
    assert client.get("/image/11").status_code == 404


def test_detach_image_owned_by_other_post(client):
    _create(client, 1)
    _create(client, 2)
    client.post("/blogposts/2/images", json={"id": 10, "data": PNG, "mime_type": "image/png", "description": "d"})

    resp = client.delete("/blogposts/1/images/10")
    assert resp.status_code == 409
    assert client.get("/blogposts/2").json()["image_ids"] == [10]


def test_create_without_tags_returns_the_stored_post(client):
    resp = client.post("/blogposts", json={"id": 1, "title": "T", "content": "C", "date": "d"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["tags"] == []
    assert body["image_ids"] == []
    assert client.get("/blogposts/1").status_code == 200


def test_duplicate_image_id_is_a_persistence_failure(client):
    _create(client, 1)
    _create(client, 2)
    image = {"id": 10, "data": PNG, "mime_type": "image/png", "description": "d"}
    assert client.post("/blogposts/2/images", json=image).status_code == 200

    resp = client.post("/blogposts/1/images", json=image)

    assert resp.status_code == 500
    body = resp.json()
    assert body["ok"] is False
    assert body["error"] == "persistence_error"
    assert client.get("/blogposts/1").json()["image_ids"] == []
    assert client.get("/blogposts/2").json()["image_ids"] == [10]


def test_malformed_body_is_invalid_input(client):
    resp = client.post("/blogposts", content="null", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_input"

    resp = client.post("/blogposts", json={"id": "abc", "title": "T", "content": "C", "date": "d"})
    assert resp.status_code == 400
    assert resp.json()["ok"] is False
    assert resp.json()["error"] == "invalid_input"
