from social_media_api.app.core import db

TOO_BIG = 2 ** 63


def _drop(table):
    with db.get_cursor() as cursor:
        cursor.execute(f"DROP TABLE {table}")


def test_register_with_broken_store_is_bad_request(client):
    _drop("message")
    _drop("account")

    resp = client.post("/register", json={"username": "bob", "password": "pass"})

    assert resp.status_code == 400
    assert resp.content == b""


def test_post_message_with_broken_account_table_is_bad_request(client, bob):
    _drop("message")
    _drop("account")

    resp = client.post("/messages", json={"postedBy": bob["id"], "text": "hi", "postedAtEpoch": 1})

    assert resp.status_code == 400
    assert resp.content == b""


def test_post_message_with_broken_message_table_is_bad_request(client, bob):
    _drop("message")

    resp = client.post("/messages", json={"postedBy": bob["id"], "text": "hi", "postedAtEpoch": 1})

    assert resp.status_code == 400
    assert resp.content == b""


def test_read_with_broken_store_is_empty_server_error(client):
    _drop("message")

    for resp in (client.get("/messages"), client.get("/messages/1"), client.get("/accounts/1/messages")):
        assert resp.status_code == 500
        assert resp.content == b""


def test_post_message_with_out_of_range_author_is_bad_request(client, bob):
    resp = client.post("/messages", json={"postedBy": TOO_BIG, "text": "hi", "postedAtEpoch": 1})

    assert resp.status_code == 400
    assert resp.content == b""


def test_post_message_with_out_of_range_epoch_is_bad_request(client, bob):
    resp = client.post("/messages", json={"postedBy": bob["id"], "text": "hi", "postedAtEpoch": TOO_BIG})

    assert resp.status_code == 400
    assert resp.content == b""
    assert client.get("/messages").json() == []


def test_out_of_range_ids_behave_like_missing_rows(client):
    for resp in (client.get(f"/messages/{TOO_BIG}"), client.delete(f"/messages/{TOO_BIG}")):
        assert resp.status_code == 200
        assert resp.content == b""

    resp = client.get(f"/accounts/{TOO_BIG}/messages")
    assert resp.status_code == 200
    assert resp.json() == []

    resp = client.patch(f"/messages/{TOO_BIG}", json={"text": "hi"})
    assert resp.status_code == 400
    assert resp.content == b""
