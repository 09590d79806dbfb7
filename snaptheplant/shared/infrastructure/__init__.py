"""
Shared infrastructure: database engine/session management, unit of work,
session stores and external HTTP API clients.
"""
