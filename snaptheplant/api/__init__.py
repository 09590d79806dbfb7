# 📄 File: snaptheplant/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as the home of the web layer: middleware and the main router.
# 🧪 Purpose (Technical Summary):
# Package initialization for the HTTP layer (middleware, router aggregation, health endpoints).
# 🔗 Dependencies:
# FastAPI, starlette
# 🔄 Connected Modules / Calls From:
# snaptheplant.main

"""
SnapThePlant API Package

Structure:
    api/
    ├── middleware/          # Error handling and request logging
    └── v1/
        ├── router.py        # Aggregates every module router under /api
        └── health.py        # Health check endpoints
"""
