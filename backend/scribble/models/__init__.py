# Models package init
"""
Scribble Backend — Domain Records
==================================

What:  Plain dataclasses for the records the Store owns (User, Blog).
Why separate from schemas: records hold server-side fields (passwords,
       author ids) that the API shapes in schemas/ decide whether to expose.
"""

from scribble.models.blog import Blog
from scribble.models.user import User

__all__ = ["Blog", "User"]
