"""Post API tests."""


def create_post(client, headers, **fields):
    fields.setdefault("title", "Hello")
    response = client.post("/api/v1/posts", headers=headers, json=fields)
    assert response.status_code == 201
    return response.json()


def test_create_post(client, auth_headers):
    post = create_post(client, auth_headers, title="First post", content="Body")
    assert post["title"] == "First post"
    assert post["content"] == "Body"
    assert post["published"] is False
    assert post["author"] == {
        "id": auth_headers.user_id,
        "username": auth_headers.username,
        "email": auth_headers.email,
    }


def test_create_post_requires_title(client, auth_headers):
    response = client.post("/api/v1/posts", headers=auth_headers, json={"content": "no title"})
    assert response.status_code == 400
    assert response.json() == {"error": "Title is required"}


def test_drafts_are_private(client, auth_headers, other_auth_headers):
    draft = create_post(client, auth_headers, title="Draft")
    published = create_post(client, auth_headers, title="Public", published=True)

    mine = client.get("/api/v1/posts", headers=auth_headers).json()
    assert [p["title"] for p in mine] == ["Public", "Draft"]

    theirs = client.get("/api/v1/posts", headers=other_auth_headers).json()
    assert [p["id"] for p in theirs] == [published["id"]]

    response = client.get(f"/api/v1/posts/{draft['id']}", headers=other_auth_headers)
    assert response.status_code == 404
    response = client.get(f"/api/v1/posts/{published['id']}", headers=other_auth_headers)
    assert response.status_code == 200


def test_list_only_my_posts(client, auth_headers, other_auth_headers):
    create_post(client, auth_headers, title="Mine", published=True)
    create_post(client, other_auth_headers, title="Theirs", published=True)

    response = client.get("/api/v1/posts?mine=true", headers=auth_headers)
    assert [p["title"] for p in response.json()] == ["Mine"]


def test_update_post(client, auth_headers):
    post = create_post(client, auth_headers, title="Before", content="Keep")

    response = client.put(
        f"/api/v1/posts/{post['id']}", headers=auth_headers, json={"published": True}
    )
    assert response.status_code == 200
    assert response.json()["published"] is True
    assert response.json()["title"] == "Before"
    assert response.json()["content"] == "Keep"


def test_only_author_can_modify_post(client, auth_headers, other_auth_headers):
    post = create_post(client, auth_headers, title="Mine", published=True)
    url = f"/api/v1/posts/{post['id']}"

    assert client.put(url, headers=other_auth_headers, json={"title": "Theirs"}).status_code == 404
    assert client.delete(url, headers=other_auth_headers).status_code == 404

    assert client.delete(url, headers=auth_headers).status_code == 200
    assert client.get(url, headers=auth_headers).status_code == 404
