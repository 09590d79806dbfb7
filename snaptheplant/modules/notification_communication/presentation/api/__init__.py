# 📄 File: snaptheplant/modules/notification_communication/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for emails.
# 🧪 Purpose (Technical Summary):
# FastAPI routers and schemas.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

