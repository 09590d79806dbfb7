# 📄 File: snaptheplant/modules/payment_subscription/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything to do with trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Feature module for trials, payments and subscriptions: domain models and services, infrastructure adapters and FastAPI routes.
# 🔗 Dependencies:
# FastAPI, pydantic, snaptheplant.shared
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
Payments & Subscriptions Module

Layers:
- domain: models and business rules
- infrastructure: persistence and external service adapters
- presentation: API endpoints and request/response schemas
"""
