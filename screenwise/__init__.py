"""Health-screening schedule engine.

This package contains the business logic and domain models, isolated from the
record store, authentication and UI so it is easy to test and reason about.
"""
