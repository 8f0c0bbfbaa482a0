"""
Scribble Backend — Blog Endpoint Tests
=======================================

What:  List/fetch/create through every path alias, the per-path response
       shape, auth on creation, and the signup → create → fetch flow.
"""

import pytest

from scribble.services.auth_service import LEGACY_TOKEN
from scribble.services.blog_service import parse_blog_id
from scribble.exceptions import ValidationError
from scribble.main import create_app

from conftest import build_settings, client_for

CREATE_PATHS = ["/api/blog", "/api/v1/blog"]


class TestListBlogs:

    @pytest.mark.asyncio
    async def test_legacy_path_wraps_blogs(self, test_client):
        response = await test_client.get("/api/blogs")

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body, dict)
        assert [b["id"] for b in body["blogs"]] == [1, 2]

    @pytest.mark.asyncio
    async def test_bulk_path_returns_bare_array(self, test_client):
        response = await test_client.get("/api/v1/blog/bulk")

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body, list)
        assert body[0] == {
            "id": 1,
            "title": "Getting Started with Scribble",
            "content": "This is a sample blog post about getting started with the Scribble platform.",
            "authorId": "user_1",
            "published": True,
            "author": {"name": "Test User"},
        }

    @pytest.mark.asyncio
    async def test_both_paths_list_the_same_blogs(self, test_client):
        wrapped = (await test_client.get("/api/blogs")).json()["blogs"]
        bare = (await test_client.get("/api/v1/blog/bulk")).json()
        assert wrapped == bare

    @pytest.mark.asyncio
    async def test_n_created_blogs_listed_in_creation_order(self):
        app = create_app(build_settings(seed_demo_data=False))
        async with client_for(app) as client:
            signup = await client.post(
                "/api/signup", json={"email": "a@b.com", "password": "p", "name": "A"}
            )
            headers = {"Authorization": f"Bearer {signup.json()['jwt']}"}
            titles = [f"Post {i}" for i in range(4)]
            for title in titles:
                created = await client.post(
                    "/api/v1/blog", json={"title": title, "content": "body"}, headers=headers
                )
                assert created.status_code == 200

            blogs = (await client.get("/api/v1/blog/bulk")).json()

        assert len(blogs) == len(titles)
        assert [b["title"] for b in blogs] == titles
        assert all(b["author"]["name"] for b in blogs)

    @pytest.mark.asyncio
    async def test_empty_store_lists_nothing(self):
        app = create_app(build_settings(seed_demo_data=False))
        async with client_for(app) as client:
            assert (await client.get("/api/v1/blog/bulk")).json() == []
            assert (await client.get("/api/blogs")).json() == {"blogs": []}

    @pytest.mark.asyncio
    async def test_unknown_author_reported(self, test_client, store):
        store.create_blog("Orphan", "No author", "user_404")

        blogs = (await test_client.get("/api/v1/blog/bulk")).json()
        assert blogs[-1]["author"] == {"name": "Unknown"}

    @pytest.mark.asyncio
    async def test_trailing_slash_redirects(self, test_client):
        response = await test_client.get("/api/blogs/", follow_redirects=True)
        assert response.status_code == 200
        assert "blogs" in response.json()


class TestGetBlog:

    @pytest.mark.asyncio
    async def test_get_existing_blog(self, test_client):
        response = await test_client.get("/api/v1/blog/2")

        assert response.status_code == 200
        post = response.json()["post"]
        assert post["id"] == 2
        assert post["title"] == "Advanced Scribble Techniques"
        assert post["author"] == {"name": "Test User"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", ["3", "999", "0", "-1"])
    async def test_never_created_id_is_not_found(self, test_client, blog_id):
        response = await test_client.get(f"/api/v1/blog/{blog_id}")

        assert response.status_code == 404
        assert response.json()["error"] == "Blog not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", ["abc", "one", "x1", "\u0661", "\uff13"])
    async def test_non_numeric_id_is_bad_request(self, test_client, blog_id):
        response = await test_client.get(f"/api/v1/blog/{blog_id}")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid blog ID"


class TestParseBlogId:

    def test_plain_integer(self):
        assert parse_blog_id("42") == 42

    def test_leading_integer_prefix(self):
        assert parse_blog_id("7-my-title") == 7

    @pytest.mark.parametrize("raw", ["", "abc", "-", " ", "\u0661", "\u0663\u0664"])
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(ValidationError, match="Invalid blog ID"):
            parse_blog_id(raw)


class TestCreateBlog:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", CREATE_PATHS)
    async def test_create_with_bearer_token(self, test_client, store, signup, path):
        token = (await signup())["jwt"]

        response = await test_client.post(
            path,
            json={"title": "T", "content": "C"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        assert response.json() == {"id": 3, "success": True}
        blog = store.get_blog_by_id(3)
        assert blog.author_id == "user_2"
        assert blog.published is True

    @pytest.mark.asyncio
    async def test_create_with_raw_token(self, test_client, signup):
        token = (await signup())["jwt"]

        response = await test_client.post(
            "/api/v1/blog",
            json={"title": "T", "content": "C"},
            headers={"Authorization": token},
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", CREATE_PATHS)
    async def test_missing_auth_header_is_unauthorized(self, test_client, store, path):
        response = await test_client.post(path, json={"title": "T", "content": "C"})

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized - No auth header"
        assert store.blog_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "authorization",
        ["Bearer not-a-token", "garbage", "Bearer ", LEGACY_TOKEN],
    )
    async def test_invalid_token_is_unauthorized(self, test_client, store, authorization):
        response = await test_client.post(
            "/api/v1/blog",
            json={"title": "T", "content": "C"},
            headers={"Authorization": authorization},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"
        assert store.blog_count == 2

    @pytest.mark.asyncio
    async def test_unauthorized_even_with_missing_fields(self, test_client, store):
        response = await test_client.post("/api/v1/blog", json={})
        assert response.status_code == 401
        assert store.blog_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", CREATE_PATHS)
    @pytest.mark.parametrize("content", [b"{not json", b"", b"[1, 2]"])
    async def test_unauthorized_before_body_is_read(self, test_client, store, path, content):
        response = await test_client.post(
            path, content=content, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized - No auth header"
        assert store.blog_count == 2

    @pytest.mark.asyncio
    async def test_invalid_token_with_malformed_body_is_unauthorized(self, test_client, store):
        response = await test_client.post(
            "/api/v1/blog",
            content=b"{not json",
            headers={"Content-Type": "application/json", "Authorization": "Bearer garbage"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"
        assert store.blog_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [b"{not json", b"", b"[1, 2]", b'{"title": 5, "content": "C"}'])
    async def test_authenticated_malformed_body_rejected(self, test_client, store, signup, content):
        token = (await signup())["jwt"]

        response = await test_client.post(
            "/api/v1/blog",
            content=content,
            headers={"Content-Type": "application/json", "Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"
        assert store.blog_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{"title": "T"}, {"content": "C"}, {"title": "", "content": "C"}, {}],
    )
    async def test_missing_fields_rejected(self, test_client, store, signup, body):
        token = (await signup())["jwt"]

        response = await test_client.post(
            "/api/blog", json=body, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Missing title or content"
        assert store.blog_count == 2

    @pytest.mark.asyncio
    async def test_legacy_token_accepted_when_enabled(self):
        app = create_app(build_settings(legacy_token_enabled=True))
        async with client_for(app) as client:
            response = await client.post(
                "/api/v1/blog",
                json={"title": "T", "content": "C"},
                headers={"Authorization": f"Bearer {LEGACY_TOKEN}"},
            )
            post = (await client.get("/api/v1/blog/3")).json()["post"]

        assert response.status_code == 200
        assert post["authorId"] == "user_1"
        assert post["author"] == {"name": "Test User"}


class TestEndToEnd:

    @pytest.mark.asyncio
    async def test_signup_create_fetch(self, test_client):
        signup = await test_client.post(
            "/api/signup", json={"email": "a@b.com", "password": "p", "name": "A"}
        )
        assert signup.status_code == 200
        assert signup.json()["name"] == "A"

        created = await test_client.post(
            "/api/v1/blog",
            json={"title": "T", "content": "C"},
            headers={"Authorization": f"Bearer {signup.json()['jwt']}"},
        )
        assert created.json() == {"id": 3, "success": True}

        fetched = await test_client.get("/api/v1/blog/3")
        assert fetched.status_code == 200
        assert fetched.json() == {
            "post": {
                "id": 3,
                "title": "T",
                "content": "C",
                "authorId": "user_2",
                "published": True,
                "author": {"name": "A"},
            }
        }
