"""Services Layer - one module per use case, orchestrating validators, storage and providers.

Invariants:
    - Validation before any storage or provider call
    - Each write path commits its own work

Design Decisions:
    - Services raise MediaShelfError subclasses; HTTP mapping happens in api/error_handlers.py
"""
