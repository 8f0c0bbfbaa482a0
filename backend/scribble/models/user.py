"""
Scribble Backend — User Record
===============================

What:  A registered account held by the Store.
When:  Created on signup; never updated or deleted for the process lifetime.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Registered user.

    Attributes:
        id:        Opaque identifier issued by the Store (`user_<n>`)
        email:     Unique across the Store, compared case-sensitively
        password:  Stored verbatim; hashing is out of scope for this service
        name:      Display name, denormalized into blog responses
    """

    id: str
    email: str
    password: str
    name: str
