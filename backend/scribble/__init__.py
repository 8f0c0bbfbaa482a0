"""
Scribble Backend — Application Package
=======================================

What:  Blogging API: signup/signin with signed session tokens, and blog posts
       (create, list, fetch by id) held in process memory.
Who:   Imported by uvicorn (`scribble.main:app`), pytest, and the
       `scribble-api` console script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Presence checks, auth, formatting
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclass records + Pydantic
    ├─────────────────────────────────────┤
    │         Store (In-memory state)     │  ← One instance per app
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
