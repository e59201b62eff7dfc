"""
Users API - root package.

This package contains the FastAPI app entry point (main.py), API routes,
the users service, and the SQLite-backed repository.
"""
