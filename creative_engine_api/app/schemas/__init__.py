"""
Pydantic schema definitions for API payloads.

Request fields are optional at the schema level so that missing input
reaches the route handlers, which answer it with HTTP 400.
"""
