from findmeme.domain.enums import MediaType, MemeStatus


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


def test_list_is_public_and_only_approved(api_client, seed_meme):
    seed_meme("approved cat", tags=["cat"])
    seed_meme("pending cat", status=MemeStatus.pending)
    seed_meme("rejected cat", status=MemeStatus.rejected)

    r = api_client.get("/api/memes")
    assert r.status_code == 200
    body = r.json()
    assert [m["title"] for m in body] == ["approved cat"]
    assert body[0]["tags"] == ["cat"]
    assert body[0]["status"] == "approved"


def test_search_and_type_query_params(api_client, seed_meme):
    seed_meme("plain", tags=["Dog"])
    gif_id = seed_meme("dance", media_type=MediaType.gif, tags=["dog"])

    assert len(api_client.get("/api/memes", params={"search": "DOG"}).json()) == 2
    r = api_client.get("/api/memes", params={"search": "dog", "type": "gif"})
    assert [m["id"] for m in r.json()] == [gif_id]

    r = api_client.get("/api/memes", params={"type": "sticker"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_get_by_id(api_client, seed_meme):
    mid = seed_meme("single")
    assert api_client.get(f"/api/memes/{mid}").json()["title"] == "single"
    r = api_client.get("/api/memes/99999")
    assert r.status_code == 404
    assert r.json() == {"error": "Meme not found"}


def test_submit_with_file_goes_pending_and_is_owned_by_caller(api_client, user_token, media_storage):
    r = api_client.post(
        "/api/memes",
        data={"title": "Upload", "media_type": "image", "tags": ["Funny", "cat"], "user_id": "999"},
        files={"file": ("cat.png", b"\x89PNG-bytes", "image/png")},
        headers=_bearer(user_token),
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["status"] == "pending"
    assert body["tags"] == ["cat", "funny"]
    assert body["media_url"].startswith("https://media.test/")
    assert body["user_id"] != 999
    assert media_storage.uploads[0].content_type == "image/png"

    # not publicly visible until approved
    assert api_client.get("/api/memes").json() == []


def test_anonymous_submit_uses_placeholder_and_csv_tags(api_client, settings):
    r = api_client.post("/api/memes", data={"title": "No file", "media_type": "video", "tags": "a, B"})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["media_url"] == settings.storage.placeholder_url
    assert body["tags"] == ["a", "b"]
    assert body["user_id"] is None


def test_submit_validation_errors_are_400(api_client):
    r = api_client.post("/api/memes", data={"media_type": "image"})
    assert r.status_code == 400
    assert r.json() == {"error": "Title is required"}

    r = api_client.post("/api/memes", data={"title": "x", "media_type": "podcast"})
    assert r.status_code == 400


def test_oversized_upload_is_400(api_client):
    r = api_client.post(
        "/api/memes",
        data={"title": "huge", "media_type": "image"},
        files={"file": ("big.png", b"0" * 4096, "image/png")},
    )
    assert r.status_code == 400


def test_upload_failure_is_502_and_writes_nothing(api_client, media_storage, admin_token):
    media_storage.fail = True
    r = api_client.post(
        "/api/memes",
        data={"title": "lost", "media_type": "image"},
        files={"file": ("x.png", b"abc", "image/png")},
    )
    assert r.status_code == 502
    assert r.json() == {"error": "Upload failed"}
    assert api_client.get("/api/admin/pending-memes", headers=_bearer(admin_token)).json() == []


def test_bad_token_on_submit_is_401_not_anonymous(api_client):
    r = api_client.post("/api/memes", data={"title": "t", "media_type": "image"},
                        headers=_bearer("forged"))
    assert r.status_code == 401


def test_delete_requires_admin(api_client, seed_meme, user_token, admin_token):
    mid = seed_meme("target")

    assert api_client.delete(f"/api/memes/{mid}").status_code == 401
    assert api_client.delete(f"/api/memes/{mid}", headers=_bearer(user_token)).status_code == 403

    r = api_client.delete(f"/api/memes/{mid}", headers=_bearer(admin_token))
    assert r.status_code == 200
    assert r.json() == {"message": "Meme deleted successfully"}
    assert api_client.get(f"/api/memes/{mid}").status_code == 404
    assert api_client.delete(f"/api/memes/{mid}", headers=_bearer(admin_token)).status_code == 404
