"""HTTP tests for the /users endpoints."""

import pytest


def test_list_users(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["code"] == 200
    assert [u["id"] for u in body["data"]] == [1, 2, 3]
    assert "error" not in body


def test_get_user(client):
    resp = client.get("/users/2")
    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "age": 25}


def test_get_missing_user(client):
    resp = client.get("/users/999")
    assert resp.status_code == 404
    body = resp.json()
    assert body == {"success": False, "error": "User not found.", "code": 404}


def test_get_user_bad_id(client):
    resp = client.get("/users/abc")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid user ID format. Must be an Integer."


def test_create_user(client, new_user):
    resp = client.post("/users", json=new_user)
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["code"] == 201
    assert body["message"] == "User created successfully."
    assert body["data"] == {"id": 4, **new_user}


def test_create_ignores_client_supplied_id(client, new_user):
    resp = client.post("/users", json={**new_user, "id": 1})
    assert resp.status_code == 201
    assert resp.json()["data"]["id"] == 4


def test_created_ids_are_unique(client, new_user):
    ids = [client.post("/users", json=new_user).json()["data"]["id"] for _ in range(3)]
    assert ids == [4, 5, 6]
    client.delete("/users/6")
    assert client.post("/users", json=new_user).json()["data"]["id"] == 7
    all_ids = [u["id"] for u in client.get("/users").json()["data"]]
    assert len(all_ids) == len(set(all_ids))


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "", "email": "a@example.com", "age": 30}, "name is required"),
        ({"email": "a@example.com", "age": 30}, "name is required"),
        ({"name": "A", "email": "", "age": 30}, "email is required"),
        ({"name": "A", "email": "not-an-email", "age": 30}, "invalid email format"),
        ({"name": "A", "email": "a@example.com", "age": 0}, "age must be a positive integer (1-150)"),
        ({"name": "A", "email": "a@example.com", "age": 200}, "age must be a positive integer (1-150)"),
        ({"name": "A", "email": "a@example.com"}, "age must be a positive integer (1-150)"),
    ],
)
def test_create_user_validation(client, payload, message):
    resp = client.post("/users", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == message
    assert len(client.get("/users").json()["data"]) == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"name": "A", "email": "a@example.com", "age": "old"}},
        {"json": {"name": "A", "email": "a@example.com", "age": "30"}},
        {"json": {"name": "A", "email": "a@example.com", "age": True}},
        {"json": {"name": "A", "email": "a@example.com", "age": 30.0}},
        {"json": {"name": 7, "email": "a@example.com", "age": 30}},
        {"json": [1, 2, 3]},
        {"content": b"{not json", "headers": {"Content-Type": "application/json"}},
    ],
)
def test_create_user_malformed_body(client, kwargs):
    resp = client.post("/users", **kwargs)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON format or missing fields."
    assert len(client.get("/users").json()["data"]) == 3


def test_update_user(client):
    payload = {"name": "Robert Wilson", "email": "robert@example.com", "age": 36}
    resp = client.put("/users/3", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "User updated successfully."
    assert body["data"] == {"id": 3, **payload}
    assert client.get("/users/3").json()["data"] == {"id": 3, **payload}
    assert [u["id"] for u in client.get("/users").json()["data"]] == [1, 2, 3]


def test_update_missing_user(client):
    resp = client.put("/users/42", json={"name": "A", "email": "a@example.com", "age": 20})
    assert resp.status_code == 404
    assert resp.json()["error"] == "User not found."


def test_update_missing_user_with_bad_body_is_404(client):
    resp = client.put("/users/42", json={"age": "old"})
    assert resp.status_code == 404


def test_update_missing_user_with_unparsable_body_is_404(client):
    resp = client.put("/users/42", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "User not found."


def test_update_user_validation(client):
    resp = client.put("/users/1", json={"name": "John", "email": "john-at-example.com", "age": 30})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid email format"
    assert client.get("/users/1").json()["data"]["email"] == "john@example.com"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"name": "John", "email": "j@example.com", "age": "thirty"}},
        {"json": {"name": "John", "email": "j@example.com", "age": "31"}},
        {"json": {"name": "John", "email": "j@example.com", "age": False}},
        {"json": {"name": "John", "email": "j@example.com", "age": 31.0}},
        {"json": "John"},
        {"content": b"{not json", "headers": {"Content-Type": "application/json"}},
        {},
    ],
)
def test_update_user_malformed_body(client, kwargs):
    resp = client.put("/users/1", **kwargs)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON format or missing fields."
    assert client.get("/users/1").json()["data"]["age"] == 30


def test_update_user_bad_id(client):
    resp = client.put("/users/x", json={"name": "A", "email": "a@example.com", "age": 20})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid user ID format. Must be an Integer."


def test_delete_user(client):
    resp = client.delete("/users/1")
    assert resp.status_code == 200
    body = resp.json()
    assert body == {"success": True, "message": "User deleted successfully.", "code": 200}
    assert client.get("/users/1").status_code == 404
    assert [u["id"] for u in client.get("/users").json()["data"]] == [2, 3]


def test_delete_missing_user(client):
    assert client.delete("/users/1000").status_code == 404


def test_delete_user_bad_id(client):
    resp = client.delete("/users/1.5")
    assert resp.status_code == 400


def test_search_users_case_insensitive(client):
    resp = client.get("/users/search", params={"name": "SMI"})
    assert resp.status_code == 200
    assert [u["name"] for u in resp.json()["data"]] == ["Jane Smith"]


def test_search_users_substring(client):
    resp = client.get("/users/search", params={"name": "o"})
    assert [u["id"] for u in resp.json()["data"]] == [1, 3]


def test_search_users_no_match(client):
    resp = client.get("/users/search", params={"name": "nobody"})
    assert resp.status_code == 200
    assert resp.json()["data"] == []


@pytest.mark.parametrize("params", [{}, {"name": ""}])
def test_search_users_requires_name(client, params):
    resp = client.get("/users/search", params=params)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing 'name' query parameter for search."


def test_crud_round_trip(client, new_user):
    created = client.post("/users", json=new_user).json()["data"]
    user_id = created["id"]
    assert client.get(f"/users/{user_id}").json()["data"] == created

    changed = {"name": "Alice C.", "email": "ac@example.com", "age": 43}
    client.put(f"/users/{user_id}", json=changed)
    assert client.get(f"/users/{user_id}").json()["data"] == {"id": user_id, **changed}
    assert client.get("/users/search", params={"name": "alice c"}).json()["data"][0]["id"] == user_id

    assert client.delete(f"/users/{user_id}").status_code == 200
    assert client.get(f"/users/{user_id}").status_code == 404


def test_unknown_route_uses_envelope(client):
    resp = client.get("/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["success"] is False
