# 📄 File: snaptheplant/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for user accounts.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

