# 📄 File: snaptheplant/modules/plant_identification/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything to do with plant photo identification.
# 🧪 Purpose (Technical Summary):
# Feature module for plant photo identification: domain models and services, infrastructure adapters and FastAPI routes.
# 🔗 Dependencies:
# FastAPI, pydantic, snaptheplant.shared
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
Plant Identification Module

Layers:
- domain: models and business rules
- infrastructure: persistence and external service adapters
- presentation: API endpoints and request/response schemas
"""
