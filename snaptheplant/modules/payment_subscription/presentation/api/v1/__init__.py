# 📄 File: snaptheplant/modules/payment_subscription/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 web endpoints for trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# FastAPI routers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Payments & Subscriptions API v1 routes.
"""
