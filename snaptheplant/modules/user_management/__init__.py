# 📄 File: snaptheplant/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything to do with user accounts.
# 🧪 Purpose (Technical Summary):
# Feature module for user accounts: domain models and services, infrastructure adapters and FastAPI routes.
# 🔗 Dependencies:
# FastAPI, pydantic, snaptheplant.shared
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
User Management Module

Layers:
- domain: models and business rules
- infrastructure: persistence and external service adapters
- presentation: API endpoints and request/response schemas
"""
