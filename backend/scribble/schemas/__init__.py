# Schemas package init
"""
Scribble Backend — API Schemas
===============================

What:  Pydantic models for request bodies and response payloads.
       Field names follow the JSON the existing frontend reads
       (`jwt`, `authorId`, `post`, `blogs`), via field aliases where
       the Python name differs.
"""
