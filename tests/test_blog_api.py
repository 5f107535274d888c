"""
HTTP tests for /api/blogs.
"""

from helpers import (
    INITIAL_BLOGS,
    UNKNOWN_ID,
    auth_header,
    blogs_in_db,
    non_existing_id,
    users_in_db,
)


NEW_BLOG = {
    "title": "Travel",
    "author": "Liza Simpson",
    "url": "http://somethingelse.com",
    "likes": 30,
}


# =============================================================================
# Listing
# =============================================================================


class TestListBlogs:
    def test_blogs_are_returned_as_json(self, client):
        response = client.get("/api/blogs")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")

    def test_all_blogs_are_returned(self, client):
        response = client.get("/api/blogs")

        assert len(response.json()) == len(INITIAL_BLOGS)

    def test_blogs_have_id_property(self, client, store):
        body = client.get("/api/blogs").json()

        ids = [b["id"] for b in body]
        assert len(ids) == len(blogs_in_db(store))
        assert all("_id" not in b for b in body)

    def test_owner_is_expanded_without_password_hash(self, client, token_for):
        token = token_for()
        client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token))

        body = client.get("/api/blogs").json()
        owned = [b for b in body if b["title"] == NEW_BLOG["title"]]

        assert len(owned) == 1
        assert owned[0]["user"] == {"username": "alice123", "name": "Alice Johnson"}

    def test_legacy_blogs_have_no_owner(self, client):
        body = client.get("/api/blogs").json()
        assert all(b["user"] is None for b in body)


# =============================================================================
# Creating
# =============================================================================


class TestCreateBlog:
    def test_valid_blog_can_be_added(self, client, store, token_for):
        token = token_for()

        response = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token))

        assert response.status_code == 201
        assert response.headers["content-type"].startswith("application/json")

        blogs = blogs_in_db(store)
        assert len(blogs) == len(INITIAL_BLOGS) + 1
        assert "Liza Simpson" in [b["author"] for b in blogs]

    def test_owner_is_the_caller(self, client, store, token_for):
        token = token_for()
        account = users_in_db(store)[0]

        body = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token)).json()

        assert body["user"] == account["id"]

    def test_blog_is_recorded_on_the_account(self, client, store, token_for):
        token = token_for()

        body = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token)).json()

        assert users_in_db(store)[0]["blogs"] == [body["id"]]

    def test_likes_default_to_zero(self, client, store, token_for):
        token = token_for()
        blog = {"title": "Cooking", "author": "Kate Winston", "url": "http://bestcook.com"}

        response = client.post("/api/blogs", json=blog, headers=auth_header(token))

        assert response.json()["likes"] == 0
        stored = [b for b in blogs_in_db(store) if b["title"] == "Cooking"]
        assert stored[0]["likes"] == 0

    def test_missing_title_is_rejected(self, client, store, token_for):
        token = token_for()
        blog = {"author": "Max Litt", "url": "http://maxlitt.com"}

        response = client.post("/api/blogs", json=blog, headers=auth_header(token))

        assert response.status_code == 400
        assert "error" in response.json()
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)

    def test_missing_url_is_rejected(self, client, store, token_for):
        token = token_for()
        blog = {"title": "Cars", "author": "Max Litt"}

        response = client.post("/api/blogs", json=blog, headers=auth_header(token))

        assert response.status_code == 400
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)

    def test_empty_title_is_rejected(self, client, store, token_for):
        token = token_for()
        blog = {"title": "", "url": "http://maxlitt.com"}

        response = client.post("/api/blogs", json=blog, headers=auth_header(token))

        assert response.status_code == 400

    def test_without_token_returns_401(self, client, store):
        response = client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == 401
        assert response.json() == {"error": "token missing"}
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)

    def test_with_invalid_token_returns_401(self, client, store):
        response = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header("not-a-jwt"))

        assert response.status_code == 401
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)

    def test_lowercase_scheme_counts_as_no_token(self, client, token_for):
        token = token_for()

        response = client.post(
            "/api/blogs", json=NEW_BLOG, headers={"Authorization": f"bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "token missing"

    def test_created_blog_is_listed_once(self, client, token_for):
        token = token_for()
        created = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token)).json()

        listed = [b for b in client.get("/api/blogs").json() if b["id"] == created["id"]]

        assert len(listed) == 1
        assert created["id"].isalnum()


# =============================================================================
# Updating
# =============================================================================


class TestUpdateBlog:
    UPDATE = {
        "title": "Favourite food",
        "author": "John Smith",
        "url": "http://something.com",
        "likes": 50,
    }

    def test_valid_id_can_be_updated(self, client, store):
        target = blogs_in_db(store)[0]

        response = client.put(f"/api/blogs/{target['id']}", json=self.UPDATE)

        assert response.status_code == 200
        assert response.json()["likes"] == 50
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)

    def test_update_needs_no_token(self, client, store, token_for):
        token = token_for()
        created = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token)).json()

        response = client.put(f"/api/blogs/{created['id']}", json={"likes": 99})

        assert response.status_code == 200
        assert response.json()["likes"] == 99
        assert response.json()["title"] == NEW_BLOG["title"]

    def test_unknown_id_returns_404(self, client):
        response = client.put(f"/api/blogs/{UNKNOWN_ID}", json=self.UPDATE)

        assert response.status_code == 404

    def test_malformed_id_returns_400(self, client):
        response = client.put("/api/blogs/not-an-id", json=self.UPDATE)

        assert response.status_code == 400
        assert response.json() == {"error": "malformatted id"}


# =============================================================================
# Deleting
# =============================================================================


class TestDeleteBlog:
    def test_owner_can_delete(self, client, store, token_for):
        token = token_for()
        created = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token)).json()

        response = client.delete(f"/api/blogs/{created['id']}", headers=auth_header(token))

        assert response.status_code == 204
        assert response.content == b""
        assert created["id"] not in [b["id"] for b in blogs_in_db(store)]

    def test_back_reference_is_left_behind(self, client, store, token_for):
        token = token_for()
        created = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token)).json()

        client.delete(f"/api/blogs/{created['id']}", headers=auth_header(token))

        assert users_in_db(store)[0]["blogs"] == [created["id"]]

    def test_non_owner_gets_400_and_blog_is_kept(self, client, store, token_for):
        alice = token_for()
        bob = token_for("bob456", "Bob Smith", "bobSecure")
        created = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(alice)).json()

        response = client.delete(f"/api/blogs/{created['id']}", headers=auth_header(bob))

        assert response.status_code == 400
        assert created["id"] in [b["id"] for b in blogs_in_db(store)]

    def test_ownerless_blog_cannot_be_deleted(self, client, store, token_for):
        token = token_for()
        legacy = blogs_in_db(store)[0]

        response = client.delete(f"/api/blogs/{legacy['id']}", headers=auth_header(token))

        assert response.status_code == 400
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)

    def test_unknown_id_returns_404(self, client, token_for):
        token = token_for()

        response = client.delete(f"/api/blogs/{UNKNOWN_ID}", headers=auth_header(token))

        assert response.status_code == 404

    def test_deleted_id_returns_404(self, client, store, token_for):
        token = token_for()
        gone = non_existing_id(store)

        response = client.delete(f"/api/blogs/{gone}", headers=auth_header(token))

        assert response.status_code == 404

    def test_without_token_returns_401(self, client, store):
        target = blogs_in_db(store)[0]

        response = client.delete(f"/api/blogs/{target['id']}")

        assert response.status_code == 401
        assert len(blogs_in_db(store)) == len(INITIAL_BLOGS)


# =============================================================================
# End to end
# =============================================================================


def test_register_login_create(client, store):
    before = len(blogs_in_db(store))

    client.post(
        "/api/users",
        json={"username": "alice123", "name": "Alice Johnson", "password": "alicePassword"},
    )
    token = client.post(
        "/api/login", json={"username": "alice123", "password": "alicePassword"}
    ).json()["token"]

    response = client.post("/api/blogs", json=NEW_BLOG, headers=auth_header(token))

    assert response.status_code == 201
    assert len(blogs_in_db(store)) == before + 1


def test_unknown_endpoint(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "unknown endpoint"}


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
