"""
Scribble Backend — In-Memory Store
===================================

What:  Owns every user and blog record plus their id counters.
How:   Users live in a dict keyed by id, blogs in an insertion-ordered list.
       Ids are issued from monotonic counters that never rewind.
Who:   Created once by the application factory (create_app) and stored on
       `app.state.store`; route handlers receive it through `get_store`.
When:  Lives for the process lifetime. A restart discards all data.

Concurrency:
    Handlers run on a single asyncio event loop and no store method awaits,
    so each read-modify-write completes before another request can touch the
    store. No locks are taken.
"""

import logging
from typing import Dict, List, Optional

from starlette.requests import Request

from scribble.exceptions import DuplicateEmailError
from scribble.models import Blog, User

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"

DEMO_USER_EMAIL = "test@example.com"
DEMO_USER_PASSWORD = "password123"
DEMO_USER_NAME = "Test User"

DEMO_BLOGS = (
    (
        "Getting Started with Scribble",
        "This is a sample blog post about getting started with the Scribble platform.",
    ),
    (
        "Advanced Scribble Techniques",
        "Learn advanced techniques for writing engaging content on Scribble.",
    ),
)


class Store:
    """
    Process-local collections of users and blogs.

    Invariants:
        - User emails are unique (exact, case-sensitive match)
        - Blog ids are unique and strictly increasing in insertion order
        - Blogs are never validated against the user collection on write
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._blogs: List[Blog] = []
        self._next_user_id = 1
        self._next_blog_id = 1
        self.demo_user_id: Optional[str] = None

    # ── Users ─────────────────────────────────────────────────────────────

    def create_user(self, email: str, password: str, name: str) -> User:
        """
        Register a new user.

        Raises:
            DuplicateEmailError: Another user already has this email
        """
        if self.find_user_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = User(
            id=f"user_{self._next_user_id}",
            email=email,
            password=password,
            name=name,
        )
        self._next_user_id += 1
        self._users[user.id] = user
        logger.info("User created: %s", user.id)
        return user

    def find_user_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def find_user_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        """Return the user whose email and password both match exactly."""
        for user in self._users.values():
            if user.email == email and user.password == password:
                return user
        return None

    def author_name(self, author_id: str) -> str:
        """Display name for a blog author, or "Unknown" when the id does not resolve."""
        author = self._users.get(author_id)
        if author is None or not author.name:
            return UNKNOWN_AUTHOR
        return author.name

    @property
    def users(self) -> List[User]:
        return list(self._users.values())

    @property
    def user_count(self) -> int:
        return len(self._users)

    # ── Blogs ─────────────────────────────────────────────────────────────

    def create_blog(self, title: str, content: str, author_id: str) -> Blog:
        """Append a published blog. The author id is not checked against users."""
        blog = Blog(
            id=self._next_blog_id,
            title=title,
            content=content,
            author_id=author_id,
            published=True,
        )
        self._next_blog_id += 1
        self._blogs.append(blog)
        logger.info("Blog %d created by %s", blog.id, author_id)
        return blog

    def list_published_blogs(self) -> List[Blog]:
        return [blog for blog in self._blogs if blog.published]

    def get_blog_by_id(self, blog_id: int) -> Optional[Blog]:
        for blog in self._blogs:
            if blog.id == blog_id:
                return blog
        return None

    @property
    def blogs(self) -> List[Blog]:
        return list(self._blogs)

    @property
    def blog_count(self) -> int:
        return len(self._blogs)

    # ── Fixtures ──────────────────────────────────────────────────────────

    def seed_demo_data(self) -> User:
        """
        Insert the demo account and two sample posts.

        Called by the application factory when `seed_demo_data` is enabled,
        before any request is served, so the demo user is `user_1` and the
        sample posts take blog ids 1 and 2.
        """
        user = self.create_user(DEMO_USER_EMAIL, DEMO_USER_PASSWORD, DEMO_USER_NAME)
        for title, content in DEMO_BLOGS:
            self.create_blog(title, content, user.id)
        self.demo_user_id = user.id
        logger.info(
            "Seeded demo data: user %s with %d posts", user.id, len(DEMO_BLOGS)
        )
        return user


def get_store(request: Request) -> Store:
    """
    FastAPI dependency returning the application's Store.

    Usage in routes:
        @router.get("/api/blogs")
        async def list_blogs(store: Store = Depends(get_store)):
            ...
    """
    return request.app.state.store
