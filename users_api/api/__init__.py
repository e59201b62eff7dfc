"""
API layer for the Users API.

Exposes the users HTTP endpoints (list, get, create, delete).
"""
