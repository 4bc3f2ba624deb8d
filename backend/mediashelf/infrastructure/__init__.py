"""Infrastructure Layer - database sessions, provider HTTP clients, logging.

Invariants:
    - Every provider failure is mapped to a MediaShelfError subclass
    - Provider clients take an injectable httpx transport

Design Decisions:
    - Thin async wrappers over httpx; payload shaping stays in core/movie_transform.py
"""
