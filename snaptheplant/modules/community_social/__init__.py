# 📄 File: snaptheplant/modules/community_social/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything to do with community plant posts.
# 🧪 Purpose (Technical Summary):
# Feature module for community plant posts: domain models and services, infrastructure adapters and FastAPI routes.
# 🔗 Dependencies:
# FastAPI, pydantic, snaptheplant.shared
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
Community Module

Layers:
- domain: models and business rules
- infrastructure: persistence and external service adapters
- presentation: API endpoints and request/response schemas
"""
