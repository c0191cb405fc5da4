from bson import ObjectId


def _create(client, title, userid="u1", **fields):
    return client.post(f"/posts/{userid}", json={"title": title, **fields})


class TestListPosts:
    def test_empty(self, client):
        resp = client.get("/posts")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_lists_all_without_page_number(self, client):
        for i in range(25):
            _create(client, f"t{i:02d}")
        assert len(client.get("/posts").json()) == 25

    def test_page_size_defaults_to_twenty(self, client):
        for i in range(25):
            _create(client, f"t{i:02d}")
        first = client.get("/posts", params={"pageNumber": 1}).json()
        second = client.get("/posts", params={"pageNumber": 2}).json()
        assert len(first) == 20
        assert [p["title"] for p in second] == [f"t{i:02d}" for i in range(20, 25)]

    def test_explicit_page_size(self, client):
        for i in range(5):
            _create(client, f"t{i}")
        resp = client.get("/posts", params={"pageNumber": 2, "pageSize": 2})
        assert [p["title"] for p in resp.json()] == ["t2", "t3"]

    def test_page_size_zero_returns_everything(self, client):
        for i in range(3):
            _create(client, f"t{i}")
        resp = client.get("/posts", params={"pageNumber": 1, "pageSize": 0})
        assert len(resp.json()) == 3

    def test_non_integer_page_number_rejected(self, client):
        resp = client.get("/posts", params={"pageNumber": "one"})
        assert resp.status_code == 422

    def test_page_number_zero_is_a_server_error(self, app):
        from fastapi.testclient import TestClient

        with TestClient(app, raise_server_exceptions=False) as client:
            _create(client, "A")
            resp = client.get("/posts", params={"pageNumber": 0})
        assert resp.status_code == 500

    def test_posts_render_string_ids_and_omit_missing_fields(self, client):
        _create(client, "A", content="B")
        post = client.get("/posts").json()[0]
        assert ObjectId.is_valid(post["_id"])
        assert post["title"] == "A"
        assert post["content"] == "B"
        assert "dynasty" not in post


class TestGetPost:
    def test_found(self, client):
        _create(
            client,
            "Quiet Night Thought",
            paragraphs=["Moonlight before my bed"],
            dynasty="Tang",
            author="Li Bai",
            notes=["moon"],
        )
        resp = client.get("/posts/Quiet Night Thought")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["author"] == "Li Bai"
        assert data["paragraphs"] == ["Moonlight before my bed"]

    def test_missing_is_null_not_404(self, client):
        resp = client.get("/posts/nonexistent")
        assert resp.status_code == 200
        assert resp.json() == {"data": None}


class TestCreatePost:
    def test_returns_status_and_userid(self, client):
        resp = _create(client, "A", content="B")
        assert resp.status_code == 200
        assert resp.json() == {"status": True, "userid": "u1"}
        assert client.get("/posts/A").json()["data"]["content"] == "B"

    def test_extra_fields_stored(self, client, posts_collection):
        _create(client, "A", mood="wistful")
        assert posts_collection.documents[0]["mood"] == "wistful"

    def test_absent_fields_not_stored(self, client, posts_collection):
        _create(client, "A")
        stored = posts_collection.documents[0]
        assert set(stored) == {"_id", "title"}

    def test_duplicate_titles_allowed(self, client):
        assert _create(client, "Same", content="1").json()["status"] is True
        assert _create(client, "Same", content="2").json()["status"] is True
        titles = [p["title"] for p in client.get("/posts").json()]
        assert titles == ["Same", "Same"]

    def test_plain_id_key_is_stored_as_data(self, client, posts_collection):
        resp = _create(client, "A", id=5)
        assert resp.status_code == 200
        stored = posts_collection.documents[0]
        assert stored["id"] == 5
        assert isinstance(stored["_id"], ObjectId)
        data = client.get("/posts/A").json()["data"]
        assert data["id"] == 5
        assert data["_id"] == str(stored["_id"])

    def test_hex_id_key_does_not_become_primary_key(self, client, posts_collection):
        hex_id = "0123456789abcdef01234567"
        assert _create(client, "C", id=hex_id).status_code == 200
        stored = posts_collection.documents[0]
        assert stored["id"] == hex_id
        assert stored["_id"] != ObjectId(hex_id)

    def test_client_supplied_object_id_rejected(self, client, posts_collection):
        resp = _create(client, "B", _id="nothex")
        assert resp.status_code == 422
        assert posts_collection.documents == []

    def test_wrong_field_type_rejected(self, client):
        resp = client.post("/posts/u1", json={"title": "A", "paragraphs": "not a list"})
        assert resp.status_code == 422


class TestUpdatePost:
    def test_echoes_without_persisting(self, client, posts_collection):
        _create(client, "A", content="original")
        resp = client.put("/posts/A", json={"content": "changed", "extra": 1})
        assert resp.status_code == 200
        assert resp.json() == {"id": "A", "data": {"content": "changed", "extra": 1}}
        assert client.get("/posts/A").json()["data"]["content"] == "original"
        assert len(posts_collection.documents) == 1

    def test_update_on_missing_post_still_echoes(self, client):
        resp = client.put("/posts/nothing", json={})
        assert resp.json() == {"id": "nothing", "data": {}}
        assert client.get("/posts").json() == []


class TestDeletePost:
    def test_delete_existing(self, client):
        _create(client, "A")
        resp = client.delete("/posts/A")
        assert resp.status_code == 200
        assert resp.json() is True
        assert client.get("/posts/A").json() == {"data": None}

    def test_delete_missing(self, client):
        assert client.delete("/posts/nonexistent").json() is False
