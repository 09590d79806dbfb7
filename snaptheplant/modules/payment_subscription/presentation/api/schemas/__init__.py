# 📄 File: snaptheplant/modules/payment_subscription/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# What the web app sends and receives for trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# presentation/api/v1 routers

"""
Payments & Subscriptions API schemas.
"""
