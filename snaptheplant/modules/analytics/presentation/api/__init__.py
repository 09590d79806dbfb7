# 📄 File: snaptheplant/modules/analytics/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for usage analytics and beta feedback.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

