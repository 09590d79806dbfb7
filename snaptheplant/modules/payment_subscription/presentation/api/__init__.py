# 📄 File: snaptheplant/modules/payment_subscription/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

