"""
API layer for the task tracker.

Exposes the HTTP endpoints under /api (register, login, tasks, health).
"""
