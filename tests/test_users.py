# tests/test_users.py

import json
import threading


def _add(client, name="Ada", email="ada@example.com"):
    return client.post("/api/users/add", json={"user": {"name": name, "email": email}})


def test_get_all_starts_empty(client):
    response = client.get("/api/users/all")
    assert response.status_code == 200
    assert response.get_json() == {"users": []}


def test_add_user_is_persisted(client, app):
    response = _add(client)
    assert response.status_code == 201

    users = client.get("/api/users/all").get_json()["users"]
    assert len(users) == 1
    assert users[0]["name"] == "Ada"
    assert users[0]["email"] == "ada@example.com"
    assert isinstance(users[0]["id"], int)
    assert users[0]["created"]

    with open(app.config["DATABASE_PATH"], encoding="utf-8") as f:
        assert json.load(f)["users"] == users


def test_add_user_without_body_is_rejected(client):
    response = client.post("/api/users/add", json={})
    assert response.status_code == 400
    assert response.get_json() == {"error": "One or more of the required parameters was missing."}


def test_add_user_missing_email_is_rejected(client):
    response = client.post("/api/users/add", json={"user": {"name": "Ada"}})
    assert response.status_code == 400


def test_add_user_with_taken_email_conflicts(client):
    _add(client)
    response = _add(client, name="Ada Again")
    assert response.status_code == 409
    assert response.get_json() == {"error": "A user with this email already exists"}
    assert len(client.get("/api/users/all").get_json()["users"]) == 1


def test_update_user(client):
    _add(client)
    user = client.get("/api/users/all").get_json()["users"][0]

    response = client.put(
        "/api/users/update",
        json={"user": {"id": user["id"], "name": "Grace", "email": "grace@example.com"}},
    )
    assert response.status_code == 200

    updated = client.get("/api/users/all").get_json()["users"][0]
    assert updated["id"] == user["id"]
    assert updated["name"] == "Grace"
    assert updated["email"] == "grace@example.com"
    assert updated["created"] == user["created"]


def test_update_unknown_user_returns_404(client):
    response = client.put(
        "/api/users/update",
        json={"user": {"id": 42, "name": "Nobody", "email": "nobody@example.com"}},
    )
    assert response.status_code == 404
    assert response.get_json() == {"error": "User not found"}


def test_update_requires_id(client):
    response = client.put(
        "/api/users/update",
        json={"user": {"name": "Nobody", "email": "nobody@example.com"}},
    )
    assert response.status_code == 400


def test_delete_user(client):
    _add(client)
    _add(client, name="Grace", email="grace@example.com")
    users = client.get("/api/users/all").get_json()["users"]

    response = client.delete(f"/api/users/delete/{users[0]['id']}")
    assert response.status_code == 200

    remaining = client.get("/api/users/all").get_json()["users"]
    assert [u["email"] for u in remaining] == [users[1]["email"]]


def test_delete_unknown_user_returns_404(client):
    response = client.delete("/api/users/delete/12345")
    assert response.status_code == 404
    assert response.get_json() == {"error": "User not found"}


def test_database_file_created_empty_on_first_access(client, app):
    assert client.get("/api/users/all").status_code == 200
    with open(app.config["DATABASE_PATH"], encoding="utf-8") as f:
        assert json.load(f) == {"users": []}


def test_non_object_json_body_is_rejected(client):
    for body in ([1], "x", 3):
        response = client.post("/api/users/add", json=body)
        assert response.status_code == 400
        assert response.get_json() == {"error": "One or more of the required parameters was missing."}


def test_add_user_from_form_body(client):
    response = client.post("/api/users/add", data={"name": "Ada", "email": "ada@example.com"})
    assert response.status_code == 201
    assert client.get("/api/users/all").get_json()["users"][0]["email"] == "ada@example.com"


def test_update_user_from_form_body(client):
    _add(client)
    user = client.get("/api/users/all").get_json()["users"][0]

    response = client.put(
        "/api/users/update",
        data={"id": str(user["id"]), "name": "Grace", "email": "grace@example.com"},
    )
    assert response.status_code == 200
    assert client.get("/api/users/all").get_json()["users"][0]["name"] == "Grace"


def test_update_to_another_users_email_conflicts(client):
    _add(client, name="A", email="a@example.com")
    _add(client, name="B", email="b@example.com")
    users = client.get("/api/users/all").get_json()["users"]
    b = next(u for u in users if u["email"] == "b@example.com")

    response = client.put(
        "/api/users/update",
        json={"user": {"id": b["id"], "name": "B", "email": "a@example.com"}},
    )
    assert response.status_code == 409
    assert response.get_json() == {"error": "A user with this email already exists"}

    emails = sorted(u["email"] for u in client.get("/api/users/all").get_json()["users"])
    assert emails == ["a@example.com", "b@example.com"]


def test_update_keeping_own_email_is_allowed(client):
    _add(client)
    user = client.get("/api/users/all").get_json()["users"][0]

    response = client.put(
        "/api/users/update",
        json={"user": {"id": user["id"], "name": "Ada L.", "email": user["email"]}},
    )
    assert response.status_code == 200


def test_concurrent_adds_keep_every_user(app):
    count = 40
    statuses = []

    def add(i):
        response = app.test_client().post(
            "/api/users/add",
            json={"user": {"name": f"user{i}", "email": f"user{i}@example.com"}},
        )
        statuses.append(response.status_code)

    threads = [threading.Thread(target=add, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert statuses == [201] * count

    response = app.test_client().get("/api/users/all")
    assert response.status_code == 200
    assert len(response.get_json()["users"]) == count

    with open(app.config["DATABASE_PATH"], encoding="utf-8") as f:
        assert len(json.load(f)["users"]) == count
