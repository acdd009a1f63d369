def test_create_user(client):
    payload = {
        "name": "John Doe",
        "email": "john@ledger.io",
        "mobile": "+919876543210",
    }

    res = client.post("/api/v1/users", json=payload)

    assert res.status_code == 201
    body = res.json()
    assert body["name"] == payload["name"]
    assert body["email"] == payload["email"]
    assert body["mobile"] == payload["mobile"]
    assert body["serial_id"] == 1


def test_serial_ids_are_sequential(make_user):
    users = [make_user() for _ in range(5)]

    assert [u["serial_id"] for u in users] == [1, 2, 3, 4, 5]


def test_invalid_user_input_is_rejected(client):
    res = client.post(
        "/api/v1/users",
        json={"name": "", "email": "invalid-email", "mobile": "invalid-phone"},
    )

    assert res.status_code == 422
    fields = {err["loc"][-1] for err in res.json()["detail"]}
    assert fields == {"name", "email", "mobile"}


def test_duplicate_email_conflicts(client, make_user):
    make_user(email="jane@ledger.io")

    res = client.post(
        "/api/v1/users",
        json={"name": "Jane Again", "email": "jane@ledger.io", "mobile": "+1234567890"},
    )

    assert res.status_code == 409
    assert res.json()["error"] == "DuplicateEmail"


def test_get_user(client, make_user):
    user = make_user(name="Jane Doe")

    res = client.get(f"/api/v1/users/{user['id']}")

    assert res.status_code == 200
    assert res.json()["name"] == "Jane Doe"


def test_get_missing_user_is_404(client):
    res = client.get("/api/v1/users/9999")

    assert res.status_code == 404
    assert res.json()["error"] == "UserNotFound"
