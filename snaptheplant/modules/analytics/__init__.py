# 📄 File: snaptheplant/modules/analytics/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything to do with usage analytics and beta feedback.
# 🧪 Purpose (Technical Summary):
# Feature module for usage analytics and beta feedback: domain models and services, infrastructure adapters and FastAPI routes.
# 🔗 Dependencies:
# FastAPI, pydantic, snaptheplant.shared
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
Analytics Module

Layers:
- domain: models and business rules
- infrastructure: persistence and external service adapters
- presentation: API endpoints and request/response schemas
"""
