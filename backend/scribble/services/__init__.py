# Services package init
"""
Scribble Backend — Services Layer
==================================

What:  Business logic between routes (HTTP) and the Store (state).
How:   Services are stateless. Each call receives the Store (and AuthService
       where tokens are involved) from the route's dependencies.

Service Inventory:
    - AuthService:  Session token issue/verify (PyJWT)
    - UserService:  Signup and signin
    - BlogService:  Create, list and fetch blogs with denormalized authors
"""
