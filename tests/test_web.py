# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

import unittest

from aiohttp.test_utils import AioHTTPTestCase

from devfolio.services import ContentService, RepositorySyncService
from devfolio.store import MemoryStore, PostTagCreate, UserUpdate
from devfolio.web import CONTENT_SERVICE, REPOSITORY_SYNC, create_app
from tests.support import FakeFetcher, post_create, repository_payload, tag_create, til_create, user_create


class BlogApiTestCase(AioHTTPTestCase):
    async def get_application(self):
        self.store = MemoryStore()
        self.fetcher = FakeFetcher([repository_payload(42, "devfolio"), repository_payload(7, "dotfiles")])
        app = create_app()
        app[CONTENT_SERVICE] = ContentService(self.store)
        app[REPOSITORY_SYNC] = RepositorySyncService(store=self.store, fetcher=self.fetcher)
        return app

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.owner = await self.store.create_user(user_create())

    async def get_json(self, path, status=200):
        async with self.client.get(path) as response:
            self.assertEqual(response.status, status, await response.text())
            return await response.json()

    async def send_json(self, method, path, payload, status):
        async with self.client.request(method, path, json=payload) as response:
            self.assertEqual(response.status, status, await response.text())
            return await response.json()


class PostRoutesTests(BlogApiTestCase):
    async def test_list_posts_uses_camel_case_and_hides_password(self):
        await self.store.create_post(post_create(self.owner.id, cover_image="https://example.com/cover.png"))

        posts = await self.get_json("/api/posts")

        self.assertEqual(len(posts), 1)
        self.assertEqual(posts[0]["coverImage"], "https://example.com/cover.png")
        self.assertEqual(posts[0]["authorId"], self.owner.id)
        self.assertIn("createdAt", posts[0])
        self.assertEqual(posts[0]["author"]["fullName"], "Alex Johnson")
        self.assertNotIn("passwordHash", posts[0]["author"])
        self.assertNotIn("password", posts[0]["author"])
        self.assertEqual(posts[0]["tags"], [])

    async def test_limited_listings(self):
        for index in range(6):
            await self.store.create_post(post_create(self.owner.id, f"post-{index}", featured=True))

        self.assertEqual(len(await self.get_json("/api/posts/recent")), 5)
        self.assertEqual(len(await self.get_json("/api/posts/recent?limit=2")), 2)
        self.assertEqual(len(await self.get_json("/api/posts/featured")), 1)
        self.assertEqual(len(await self.get_json("/api/posts/featured?limit=3")), 3)
        self.assertEqual(len(await self.get_json("/api/posts/popular")), 4)

    async def test_invalid_limit_is_rejected(self):
        for limit in ("0", "-1", "many", "101", "100000000000000000000"):
            with self.subTest(limit=limit):
                body = await self.get_json(f"/api/posts/recent?limit={limit}", status=400)
                self.assertEqual(body["message"], "limit must be an integer between 1 and 100")

        self.assertEqual(await self.get_json("/api/posts/recent?limit=100"), [])

    async def test_post_detail_and_missing_post(self):
        await self.store.create_post(post_create(self.owner.id))

        post = await self.get_json("/api/posts/hello-world")
        missing = await self.get_json("/api/posts/nope", status=404)

        self.assertEqual(post["slug"], "hello-world")
        self.assertEqual(post["author"]["username"], "alexjohnson")
        self.assertEqual(post["comments"], [])
        self.assertEqual(missing, {"message": "Post not found"})

    async def test_search(self):
        await self.store.create_post(post_create(self.owner.id, "react-hooks", title="React Hooks"))
        await self.store.create_post(post_create(self.owner.id, "react-draft", title="React draft", published=False))

        self.assertEqual([post["slug"] for post in await self.get_json("/api/search?q=react")], ["react-hooks"])
        self.assertEqual(await self.get_json("/api/search?q=%20%20"), [])
        self.assertEqual(await self.get_json("/api/search"), [])

    async def test_create_post_with_tags(self):
        react = await self.store.create_tag(tag_create("React"))
        payload = {
            "title": "Hooks in depth",
            "slug": "hooks-in-depth",
            "excerpt": "useEffect and friends",
            "content": "Long form content",
            "authorId": self.owner.id,
            "readingTime": "5 min read",
            "tags": [react.id],
        }

        created = await self.send_json("POST", "/api/posts", payload, 201)

        self.assertEqual(created["slug"], "hooks-in-depth")
        self.assertEqual(created["readingTime"], "5 min read")
        self.assertNotIn("tags", created)
        self.assertEqual(await self.store.get_post_tags(created["id"]), [react])

    async def test_create_post_validation_errors(self):
        missing_title = await self.send_json(
            "POST", "/api/posts", {"slug": "x", "excerpt": "e", "content": "c", "authorId": self.owner.id}, 400
        )
        bad_slug = await self.send_json(
            "POST",
            "/api/posts",
            {"title": "t", "slug": "Not A Slug", "excerpt": "e", "content": "c", "authorId": self.owner.id},
            400,
        )
        unknown_author = await self.send_json(
            "POST", "/api/posts", {"title": "t", "slug": "t", "excerpt": "e", "content": "c", "authorId": 999}, 400
        )

        self.assertIn("title", missing_title["message"])
        self.assertIn("slug", bad_slug["message"])
        self.assertIn("user", unknown_author["message"])

    async def test_create_post_with_unknown_tag_is_rejected(self):
        payload = {"title": "t", "slug": "t", "excerpt": "e", "content": "c", "authorId": self.owner.id, "tags": [99]}

        await self.send_json("POST", "/api/posts", payload, 400)

        self.assertEqual(await self.store.list_posts(), [])

    async def test_duplicate_slug_conflicts(self):
        await self.store.create_post(post_create(self.owner.id))
        payload = {"title": "t", "slug": "hello-world", "excerpt": "e", "content": "c", "authorId": self.owner.id}

        body = await self.send_json("POST", "/api/posts", payload, 409)

        self.assertEqual(body["message"], "Post with this slug already exists")

    async def test_malformed_json_is_rejected(self):
        async with self.client.post("/api/posts", data="{not json", headers={"Content-Type": "application/json"}) as r:
            self.assertEqual(r.status, 400)
            self.assertEqual(await r.json(), {"message": "Request body must be valid JSON"})

        body = await self.send_json("POST", "/api/posts", ["not", "an", "object"], 400)
        self.assertEqual(body["message"], "Request body must be a JSON object")


class CommentRoutesTests(BlogApiTestCase):
    async def test_comment_appears_on_post_newest_first(self):
        for index in range(7):
            post = await self.store.create_post(post_create(self.owner.id, f"post-{index}", published=False))
        self.assertEqual(post.id, 7)
        await self.send_json(
            "POST",
            "/api/comments",
            {"content": "First!", "authorName": "Sam", "authorEmail": "sam@example.com", "postId": 7},
            201,
        )

        comment = await self.send_json(
            "POST",
            "/api/comments",
            {"content": "Nice post!", "authorName": "Jess", "authorEmail": "jess@example.com", "postId": 7},
            201,
        )
        detail = await self.get_json(f"/api/posts/{post.slug}")

        self.assertIn("id", comment)
        self.assertIn("createdAt", comment)
        self.assertEqual(detail["comments"][0], comment)
        self.assertEqual([c["content"] for c in detail["comments"]], ["Nice post!", "First!"])

    async def test_invalid_comments_are_rejected(self):
        post = await self.store.create_post(post_create(self.owner.id))
        base = {"content": "Hi", "authorName": "Jess", "authorEmail": "jess@example.com", "postId": post.id}

        await self.send_json("POST", "/api/comments", {**base, "authorEmail": "not-an-email"}, 400)
        await self.send_json("POST", "/api/comments", {**base, "content": ""}, 400)
        await self.send_json("POST", "/api/comments", {**base, "postId": 999}, 400)


class TagRoutesTests(BlogApiTestCase):
    async def test_create_and_list_tags(self):
        created = await self.send_json("POST", "/api/tags", {"name": "Docker", "slug": "docker", "color": "red"}, 201)
        tags = await self.get_json("/api/tags")

        self.assertEqual(tags, [created])
        self.assertEqual(created["color"], "red")
        await self.send_json("POST", "/api/tags", {"name": "Docker 2", "slug": "docker"}, 409)
        await self.send_json("POST", "/api/tags", {"name": "", "slug": "empty"}, 400)

    async def test_posts_for_tag(self):
        tag = await self.store.create_tag(tag_create("React"))
        post = await self.store.create_post(post_create(self.owner.id))
        await self.store.add_tag_to_post(PostTagCreate(post_id=post.id, tag_id=tag.id))

        posts = await self.get_json("/api/tags/react/posts")

        self.assertEqual([item["id"] for item in posts], [post.id])
        self.assertEqual(posts[0]["tags"][0]["slug"], "react")

    async def test_unknown_tag_returns_empty_list(self):
        self.assertEqual(await self.get_json("/api/tags/nonexistent-slug/posts"), [])


class UserRoutesTests(BlogApiTestCase):
    async def test_list_and_get_users(self):
        users = await self.get_json("/api/users")
        user = await self.get_json(f"/api/users/{self.owner.id}")
        missing = await self.get_json("/api/users/999", status=404)

        self.assertEqual([item["username"] for item in users], ["alexjohnson"])
        self.assertEqual(user["fullName"], "Alex Johnson")
        self.assertNotIn("passwordHash", user)
        self.assertEqual(missing, {"message": "User not found"})

    async def test_create_user(self):
        payload = {"username": "jess", "password": "hunter22", "fullName": "Jess Doe", "skills": ["Python", "Go"]}

        created = await self.send_json("POST", "/api/users", payload, 201)

        self.assertEqual(created["skills"], ["Python", "Go"])
        self.assertEqual(created["role"], "author")
        self.assertNotIn("password", created)
        await self.send_json("POST", "/api/users", payload, 409)
        await self.send_json("POST", "/api/users", {"username": "nopass", "fullName": "No Pass"}, 400)

    async def test_partial_update(self):
        updated = await self.send_json("PUT", f"/api/users/{self.owner.id}", {"bio": "New bio"}, 200)

        self.assertEqual(updated["bio"], "New bio")
        self.assertEqual(updated["fullName"], "Alex Johnson")
        await self.send_json("PUT", "/api/users/999", {"bio": "ghost"}, 404)
        await self.send_json("PUT", f"/api/users/{self.owner.id}", {"username": ""}, 400)


class TilRoutesTests(BlogApiTestCase):
    async def test_til_routes(self):
        tag = await self.store.create_tag(tag_create("Python"))
        payload = {"title": "Walrus operator", "content": "Assignment expressions", "authorId": self.owner.id}
        created = await self.send_json("POST", "/api/til", {**payload, "tags": [tag.id]}, 201)
        await self.store.create_til_entry(til_create(self.owner.id, "Docker layers"))

        entry = await self.get_json(f"/api/til/{created['id']}")

        self.assertEqual(entry["tags"][0]["slug"], "python")
        self.assertEqual(entry["author"]["username"], "alexjohnson")
        self.assertEqual(len(await self.get_json("/api/til")), 2)
        self.assertEqual(len(await self.get_json("/api/til/recent?limit=1")), 1)
        self.assertEqual([e["id"] for e in await self.get_json("/api/til/search?q=walrus")], [created["id"]])
        self.assertEqual([e["id"] for e in await self.get_json("/api/tags/python/til")], [created["id"]])
        self.assertEqual(await self.get_json("/api/tags/nonexistent-slug/til"), [])
        self.assertEqual(await self.get_json("/api/til/999", status=404), {"message": "TIL entry not found"})

    async def test_til_validation(self):
        await self.send_json("POST", "/api/til", {"title": "No content", "authorId": self.owner.id}, 400)
        await self.send_json("POST", "/api/til", {"title": "t", "content": "c", "authorId": 999}, 400)


class GithubRoutesTests(BlogApiTestCase):
    async def test_blog_owner_repositories_are_synced(self):
        repositories = await self.get_json("/api/github/repos")

        self.assertEqual({repository["id"] for repository in repositories}, {42, 7})
        self.assertEqual(repositories[0]["userId"], self.owner.id)

    async def test_blog_owner_without_username(self):
        await self.store.update_user(self.owner.id, UserUpdate(github_url=None))

        body = await self.get_json("/api/github/repos", status=404)

        self.assertEqual(body, {"message": "User or GitHub username not found"})

    async def test_language_and_search(self):
        self.fetcher.languages["dotfiles"] = {"Shell": 10}
        await self.get_json("/api/github/repos")

        by_language = await self.get_json("/api/github/language/Shell")
        found = await self.get_json("/api/github/search?q=DEVFOLIO")

        self.assertEqual([repository["name"] for repository in by_language], ["dotfiles"])
        self.assertEqual([repository["name"] for repository in found], ["devfolio"])
        self.assertEqual(await self.get_json("/api/github/search?q="), [])

    async def test_explicit_sync(self):
        payload = {"username": "alexjohnson", "userId": self.owner.id}

        body = await self.send_json("POST", "/api/github/sync", payload, 200)

        self.assertEqual(body["message"], "Successfully synced 2 repositories")
        self.assertEqual(len(body["repositories"]), 2)

    async def test_sync_requires_username_and_user_id(self):
        for payload in ({}, {"username": "alexjohnson"}, {"userId": 1}, {"username": "", "userId": 1}):
            with self.subTest(payload=payload):
                body = await self.send_json("POST", "/api/github/sync", payload, 400)
                self.assertEqual(body, {"message": "Username and userId are required"})

    async def test_sync_for_unknown_user_is_rejected(self):
        body = await self.send_json("POST", "/api/github/sync", {"username": "alexjohnson", "userId": 999}, 400)

        self.assertEqual(body, {"message": "Referenced user 999 does not exist"})
        self.assertEqual(self.fetcher.calls, [])
        self.assertEqual(await self.store.list_github_repositories(), [])

    async def test_sync_without_token(self):
        self.fetcher.has_token = False

        body = await self.send_json("POST", "/api/github/sync", {"username": "alexjohnson", "userId": 1}, 500)

        self.assertEqual(body, {"message": "GitHub API token not configured"})

    async def test_sync_failure_reports_error(self):
        self.fetcher.failing_languages.add("dotfiles")

        body = await self.send_json("POST", "/api/github/sync", {"username": "alexjohnson", "userId": 1}, 500)

        self.assertEqual(body["message"], "Error syncing GitHub repositories")
        self.assertIn("dotfiles", body["error"])


class ErrorHandlingTests(BlogApiTestCase):
    async def test_unknown_route_is_json(self):
        body = await self.get_json("/api/nothing-here", status=404)

        self.assertEqual(body, {"message": "Not Found"})

    async def test_unexpected_errors_are_hidden(self):
        async def explode(username):
            raise RuntimeError("database password is hunter2")

        self.fetcher.list_repositories = explode

        body = await self.send_json("POST", "/api/github/sync", {"username": "alexjohnson", "userId": 1}, 500)

        self.assertEqual(body, {"message": "Internal server error"})


if __name__ == "__main__":
    unittest.main()
