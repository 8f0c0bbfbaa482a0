"""
Scribble Backend — Blog Record
===============================

What:  A blog post held by the Store.
When:  Created on authenticated blog-create; never updated or deleted.

The author is kept as an id only. Display fields are resolved at read time
(see Store.author_name), so a post whose author cannot be found still renders.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Blog:
    id: int
    title: str
    content: str
    author_id: str
    published: bool = True
