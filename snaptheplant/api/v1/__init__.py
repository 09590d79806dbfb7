# 📄 File: snaptheplant/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the first version of the API: the router that ties all features together and the health checks.
# 🧪 Purpose (Technical Summary):
# Package initialization for the versioned router and health endpoints.
# 🔗 Dependencies:
# FastAPI APIRouter
# 🔄 Connected Modules / Calls From:
# snaptheplant.main

"""
API router aggregation and health endpoints.
"""
