import uuid


def test_feed_page_uses_camel_case_and_omits_absent_fields(client, make_user, make_video):
    user = make_user("maker")
    video = make_video(user, "clip")

    response = client.get("/feed")
    assert response.status_code == 200
    body = response.json()
    assert "nextCursor" not in body

    item = body["items"][0]
    assert item["id"] == video.id
    assert item["user"] == {"id": user.id, "name": "maker"}
    assert item["likeCount"] == 0
    assert item["isLiked"] is False
    assert "createdAt" in item
    assert "description" not in item


def test_feed_returns_next_cursor(client, make_user, make_video):
    user = make_user()
    make_video(user, "a", seconds=3)
    b = make_video(user, "b", seconds=2)
    c = make_video(user, "c", seconds=1)

    first = client.get("/feed", params={"limit": 2}).json()
    assert first["nextCursor"] == b.id

    second = client.get("/feed", params={"limit": 2, "cursor": first["nextCursor"]}).json()
    assert [item["id"] for item in second["items"]] == [c.id]
    assert "nextCursor" not in second


def test_feed_rejects_bad_limits(client):
    for limit in (0, 101):
        response = client.get("/feed", params={"limit": limit})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    assert client.get("/feed", params={"limit": 100}).status_code == 200


def test_feed_rejects_non_numeric_limit(client):
    response = client.get("/feed", params={"limit": "ten"})
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


def test_feed_with_bad_token_is_anonymous(client, make_user, make_video):
    user = make_user()
    make_video(user)

    response = client.get("/feed", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 200
    assert response.json()["items"][0]["isLiked"] is False


def test_toggle_like_requires_auth(client, make_user, make_video):
    user = make_user()
    video = make_video(user)

    response = client.post("/video/toggle-like", json={"videoId": video.id})
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_toggle_like_then_feed_reflects_it(client, make_user, make_video, auth_headers):
    user = make_user()
    video = make_video(user)
    headers = auth_headers(user)

    response = client.post("/video/toggle-like", json={"videoId": video.id}, headers=headers)
    assert response.status_code == 200
    assert response.json() == {"isLiked": True}

    item = client.get("/feed", headers=headers).json()["items"][0]
    assert item["isLiked"] is True
    assert item["likeCount"] == 1

    response = client.post("/video/toggle-like", json={"videoId": video.id}, headers=headers)
    assert response.json() == {"isLiked": False}


def test_toggle_like_on_missing_video(client, make_user, auth_headers):
    user = make_user()
    response = client.post(
        "/video/toggle-like", json={"videoId": str(uuid.uuid4())}, headers=auth_headers(user)
    )
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_create_video(client, make_user, auth_headers):
    user = make_user("maker")
    payload = {"title": "first clip", "url": "https://cdn.example.com/videos/1.mp4"}

    response = client.post("/video", json=payload, headers=auth_headers(user))
    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "first clip"
    assert body["user"]["id"] == user.id
    assert body["likeCount"] == 0
    assert body["isLiked"] is False

    feed = client.get("/feed").json()
    assert [item["id"] for item in feed["items"]] == [body["id"]]


def test_create_video_requires_auth_and_title(client, make_user, auth_headers):
    payload = {"title": "", "url": "https://cdn.example.com/videos/1.mp4"}
    assert client.post("/video", json=payload).status_code == 401

    user = make_user()
    response = client.post("/video", json=payload, headers=auth_headers(user))
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"
