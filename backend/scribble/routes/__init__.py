# Routes package init
"""
Scribble Backend — API Routes Package
======================================

Route Inventory:
    - users.py:   POST /api/signup, /api/v1/user/signup
                  POST /api/signin, /api/v1/user/signin
    - blogs.py:   GET  /api/blogs, /api/v1/blog/bulk
                  GET  /api/v1/blog/{id}
                  POST /api/blog, /api/v1/blog        (bearer token)
    - health.py:  GET  /, /health, /debug (opt-in)
    - deps.py:    Shared dependencies (auth service, current user id)

Each operation is served under two paths: the original `/api/...` paths and
the `/api/v1/...` paths the current frontend calls.

Routes are thin: they pull data from the request, call a service, and return
the response model. Business logic belongs in services.
"""
