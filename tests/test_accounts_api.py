from tests.conftest import count_rows


def test_register_returns_account_with_generated_id(client):
    resp = client.post("/register", json={"username": "alice", "password": "secret"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "alice"
    assert body["password"] == "secret"
    assert isinstance(body["id"], int)
    assert count_rows("account") == 1


def test_register_short_password_is_rejected(client):
    resp = client.post("/register", json={"username": "alice", "password": "abc"})

    assert resp.status_code == 400
    assert resp.content == b""
    assert count_rows("account") == 0


def test_register_four_character_password_is_accepted(client):
    resp = client.post("/register", json={"username": "alice", "password": "abcd"})
    assert resp.status_code == 200


def test_register_blank_username_is_rejected(client):
    for username in ("", "   "):
        resp = client.post("/register", json={"username": username, "password": "secret"})
        assert resp.status_code == 400
    assert count_rows("account") == 0


def test_register_password_checked_before_username(client, bob):
    # Both a short password and a taken username: still a plain 400.
    resp = client.post("/register", json={"username": "bob", "password": "x"})
    assert resp.status_code == 400


def test_register_duplicate_username_is_rejected(client, bob):
    resp = client.post("/register", json={"username": "bob", "password": "other"})

    assert resp.status_code == 400
    assert resp.content == b""
    assert count_rows("account", "username = ?", ("bob",)) == 1


def test_register_missing_field_is_bad_request(client):
    resp = client.post("/register", json={"username": "alice"})

    assert resp.status_code == 400
    assert resp.content == b""


def test_login_with_correct_credentials(client, bob):
    resp = client.post("/login", json={"username": "bob", "password": "pass"})

    assert resp.status_code == 200
    assert resp.json() == bob


def test_login_unknown_username(client, bob):
    resp = client.post("/login", json={"username": "carol", "password": "pass"})

    assert resp.status_code == 401
    assert resp.content == b""


def test_login_wrong_password(client, bob):
    resp = client.post("/login", json={"username": "bob", "password": "Pass"})

    assert resp.status_code == 401
    assert resp.content == b""


def test_account_messages_empty_for_account_without_messages(client, bob):
    resp = client.get(f"/accounts/{bob['id']}/messages")

    assert resp.status_code == 200
    assert resp.json() == []


def test_account_messages_empty_for_unknown_account(client):
    resp = client.get("/accounts/42/messages")

    assert resp.status_code == 200
    assert resp.json() == []


def test_account_messages_only_lists_own_messages(client, bob):
    alice = client.post("/register", json={"username": "alice", "password": "secret"}).json()
    client.post("/messages", json={"postedBy": bob["id"], "text": "from bob", "postedAtEpoch": 1})
    client.post("/messages", json={"postedBy": alice["id"], "text": "from alice", "postedAtEpoch": 2})

    resp = client.get(f"/accounts/{alice['id']}/messages")

    assert resp.status_code == 200
    assert [m["text"] for m in resp.json()] == ["from alice"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
