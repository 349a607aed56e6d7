"""
Task tracker API.

FastAPI application exposing user registration/login and per-user task CRUD
under /api, backed by MongoDB.
"""
