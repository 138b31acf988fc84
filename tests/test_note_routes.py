def test_create_note_with_defaults(client):
    response = client.post("/api/notes", json={"title": "Limits"})

    assert response.status_code == 201
    note = response.json()
    assert note["title"] == "Limits"
    assert note["content"] == ""
    assert note["tags"] == []
    assert note["category"] == "Math"
    assert note["isPublic"] is False
    assert note["userId"] == 1


def test_note_owner_comes_from_caller(client):
    other = client.post("/api/users", json={"username": "ada", "password": "pw"}).json()

    note = client.post(
        "/api/notes",
        json={"title": "Cells", "category": "Biology", "tags": ["bio"]},
        headers={"X-User-Id": str(other["id"])},
    ).json()

    assert note["userId"] == other["id"]
    assert [n["id"] for n in client.get("/api/notes", params={"userId": other["id"]}).json()] == [note["id"]]
    assert client.get("/api/notes", params={"userId": 1}).json() == []


def test_create_note_rejects_blank_title_and_unknown_fields(client):
    assert client.post("/api/notes", json={"title": "   "}).status_code == 400
    assert client.post("/api/notes", json={"title": "x", "shareCode": "abc"}).status_code == 400


def test_update_note_is_partial(client):
    created = client.post("/api/notes", json={"title": "Limits", "content": "epsilon", "tags": ["calc"]}).json()

    response = client.put(f"/api/notes/{created['id']}", json={"content": "epsilon-delta", "isPublic": True})

    assert response.status_code == 200
    updated = response.json()
    assert updated["content"] == "epsilon-delta"
    assert updated["isPublic"] is True
    assert updated["title"] == "Limits"
    assert updated["tags"] == ["calc"]
    assert updated["createdAt"] == created["createdAt"]


def test_update_note_rejects_unknown_fields(client):
    created = client.post("/api/notes", json={"title": "Limits"}).json()

    response = client.put(f"/api/notes/{created['id']}", json={"userId": 5})

    assert response.status_code == 400


def test_notes_list_in_insertion_order(client):
    ids = [client.post("/api/notes", json={"title": title}).json()["id"] for title in ("a", "b", "c")]

    assert [n["id"] for n in client.get("/api/notes").json()] == ids


def test_missing_note_is_not_found(client):
    assert client.get("/api/notes/999").status_code == 404
    assert client.put("/api/notes/999", json={"title": "x"}).status_code == 404
    assert client.delete("/api/notes/999").status_code == 404


def test_delete_note(client):
    created = client.post("/api/notes", json={"title": "Limits"}).json()

    response = client.delete(f"/api/notes/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"/api/notes/{created['id']}").status_code == 404


def test_note_share_link_only_resolves_while_public(client):
    created = client.post("/api/notes", json={"title": "Limits"}).json()
    assert created["shareCode"] is None

    shared = client.post(f"/api/notes/{created['id']}/share").json()
    share_code = shared["shareCode"]
    assert share_code
    assert client.post(f"/api/notes/{created['id']}/share").json()["shareCode"] == share_code

    assert client.get(f"/api/shared/notes/{share_code}").status_code == 404
    client.put(f"/api/notes/{created['id']}", json={"isPublic": True})
    response = client.get(f"/api/shared/notes/{share_code}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    revoked = client.delete(f"/api/notes/{created['id']}/share")
    assert revoked.json()["shareCode"] is None
    assert client.get(f"/api/shared/notes/{share_code}").status_code == 404


def test_note_share_codes_do_not_resolve_as_documents(client):
    created = client.post("/api/notes", json={"title": "Limits", "isPublic": True}).json()
    share_code = client.post(f"/api/notes/{created['id']}/share").json()["shareCode"]

    assert client.get(f"/api/shared/{share_code}").status_code == 404


def test_share_missing_note_is_not_found(client):
    assert client.post("/api/notes/999/share").status_code == 404
    assert client.delete("/api/notes/999/share").status_code == 404
    assert client.get("/api/shared/notes/unknown").status_code == 404
