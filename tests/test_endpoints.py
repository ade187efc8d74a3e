"""Tests for the HTTP routes."""

from fastapi.testclient import TestClient


def test_register_returns_created_account(client: TestClient) -> None:
    response = client.post("/register", json={"username": "sam", "password": "pass1"})
    assert response.status_code == 200
    assert response.json() == {"account_id": 1, "username": "sam", "password": "pass1"}


def test_register_invalid_or_duplicate_is_400_with_empty_body(client: TestClient, registered_account: dict) -> None:
    for body in (
        {"username": "", "password": "pass1"},
        {"username": "kim", "password": "abc"},
        {"username": "sam", "password": "another"},
        {},
    ):
        response = client.post("/register", json=body)
        assert response.status_code == 400
        assert response.content == b""


def test_login(client: TestClient, registered_account: dict) -> None:
    response = client.post("/login", json={"username": "sam", "password": "pass1"})
    assert response.status_code == 200
    assert response.json() == registered_account

    response = client.post("/login", json={"username": "sam", "password": "wrong"})
    assert response.status_code == 401
    assert response.content == b""

    response = client.post("/login", json={"username": "nobody", "password": "pass1"})
    assert response.status_code == 401


def test_create_message_validation(client: TestClient, registered_account: dict) -> None:
    account_id = registered_account["account_id"]
    for body in (
        {"posted_by": account_id, "message_text": "", "time_posted_epoch": 1},
        {"posted_by": account_id, "message_text": "x" * 255, "time_posted_epoch": 1},
        {"posted_by": account_id + 1, "message_text": "hello", "time_posted_epoch": 1},
    ):
        response = client.post("/messages", json=body)
        assert response.status_code == 400
        assert response.content == b""
    assert client.get("/messages").json() == []


def test_unparseable_body_is_400(client: TestClient) -> None:
    response = client.post(
        "/messages",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.content == b""


def test_non_integer_message_id_is_400(client: TestClient) -> None:
    response = client.get("/messages/abc")
    assert response.status_code == 400


def test_list_messages(client: TestClient, registered_account: dict) -> None:
    assert client.get("/messages").json() == []
    client.post("/messages", json={"posted_by": 1, "message_text": "one", "time_posted_epoch": 1})
    client.post("/messages", json={"posted_by": 1, "message_text": "two", "time_posted_epoch": 2})

    response = client.get("/messages")
    assert response.status_code == 200
    assert sorted(m["message_text"] for m in response.json()) == ["one", "two"]


def test_missing_message_get_and_delete_are_empty_200(client: TestClient) -> None:
    for method in ("GET", "DELETE"):
        response = client.request(method, "/messages/99")
        assert response.status_code == 200
        assert response.content == b""


def test_patch_missing_or_invalid_is_400(client: TestClient, registered_account: dict) -> None:
    response = client.patch("/messages/99", json={"message_text": "hi"})
    assert response.status_code == 400

    client.post("/messages", json={"posted_by": 1, "message_text": "hello", "time_posted_epoch": 1000})
    for body in ({"message_text": ""}, {"message_text": "z" * 255}, {}):
        response = client.patch("/messages/1", json=body)
        assert response.status_code == 400
        assert response.content == b""
    assert client.get("/messages/1").json()["message_text"] == "hello"


def test_account_messages(client: TestClient, registered_account: dict) -> None:
    other = client.post("/register", json={"username": "kim", "password": "pass2"}).json()
    client.post("/messages", json={"posted_by": 1, "message_text": "mine", "time_posted_epoch": 1})
    client.post("/messages", json={"posted_by": other["account_id"], "message_text": "theirs", "time_posted_epoch": 2})

    response = client.get("/accounts/1/messages")
    assert response.status_code == 200
    assert [m["message_text"] for m in response.json()] == ["mine"]

    response = client.get("/accounts/42/messages")
    assert response.status_code == 200
    assert response.json() == []


def test_end_to_end_scenario(client: TestClient) -> None:
    response = client.post("/register", json={"username": "sam", "password": "pass1"})
    assert response.status_code == 200
    assert response.json()["account_id"] == 1

    message = {"posted_by": 1, "message_text": "hello", "time_posted_epoch": 1000}
    response = client.post("/messages", json=message)
    assert response.status_code == 200
    assert response.json() == {"message_id": 1, **message}

    response = client.get("/messages/1")
    assert response.status_code == 200
    assert response.json() == {"message_id": 1, **message}

    response = client.patch("/messages/1", json={"message_text": "hi"})
    assert response.status_code == 200
    updated = {"message_id": 1, "posted_by": 1, "message_text": "hi", "time_posted_epoch": 1000}
    assert response.json() == updated

    response = client.delete("/messages/1")
    assert response.status_code == 200
    assert response.json() == updated

    response = client.get("/messages/1")
    assert response.status_code == 200
    assert response.content == b""


def test_ids_beyond_64_bits_are_400(client: TestClient, registered_account: dict) -> None:
    too_big = 2**70
    for method, path in (
        ("GET", f"/messages/{too_big}"),
        ("DELETE", f"/messages/{too_big}"),
        ("GET", f"/accounts/{too_big}/messages"),
    ):
        response = client.request(method, path)
        assert response.status_code == 400
        assert response.content == b""

    response = client.patch(f"/messages/{too_big}", json={"message_text": "hi"})
    assert response.status_code == 400


def test_create_message_with_out_of_range_integers_is_400(client: TestClient, registered_account: dict) -> None:
    for body in (
        {"posted_by": 2**70, "message_text": "hello", "time_posted_epoch": 1},
        {"posted_by": 1, "message_text": "hello", "time_posted_epoch": 2**70},
        {"posted_by": 1, "message_text": "hello", "time_posted_epoch": -(2**70)},
    ):
        response = client.post("/messages", json=body)
        assert response.status_code == 400
        assert response.content == b""
    assert client.get("/messages").json() == []


def test_largest_sqlite_integer_is_accepted(client: TestClient, registered_account: dict) -> None:
    epoch = 2**63 - 1
    response = client.post("/messages", json={"posted_by": 1, "message_text": "late", "time_posted_epoch": epoch})
    assert response.status_code == 200
    assert client.get("/messages/1").json()["time_posted_epoch"] == epoch

    response = client.get(f"/messages/{2**63 - 1}")
    assert response.status_code == 200
    assert response.content == b""


def test_null_or_missing_timestamp_is_stored_as_zero(client: TestClient, registered_account: dict) -> None:
    response = client.post("/messages", json={"posted_by": 1, "message_text": "hi", "time_posted_epoch": None})
    assert response.status_code == 200
    assert response.json()["time_posted_epoch"] == 0

    response = client.post("/messages", json={"posted_by": 1, "message_text": "again"})
    assert response.status_code == 200
    assert response.json()["time_posted_epoch"] == 0

    assert [m["time_posted_epoch"] for m in client.get("/messages").json()] == [0, 0]
