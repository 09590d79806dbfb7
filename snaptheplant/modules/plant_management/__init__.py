# 📄 File: snaptheplant/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything to do with plants and their care schedule.
# 🧪 Purpose (Technical Summary):
# Feature module for plants and their care schedule: domain models and services, infrastructure adapters and FastAPI routes.
# 🔗 Dependencies:
# FastAPI, pydantic, snaptheplant.shared
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
Plant Management Module

Layers:
- domain: models and business rules
- infrastructure: persistence and external service adapters
- presentation: API endpoints and request/response schemas
"""
